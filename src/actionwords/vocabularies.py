"""Built-in polyglot keyword tables.

Order inside a table and inside every keyword list is significant: the
resolver takes the first exact match and prefers earlier spellings.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .actions import ActionCode, ActionEntry
from .resolver import resolve

_A = ActionEntry
_WD = ActionCode.WEEKDAY
_MON = ActionCode.MONTH
_TZO = ActionCode.TIME_ZONE_OFFSET
_TOD = ActionCode.TIME_OF_DAY
_DAY = ActionCode.DAY

# Verbosity levels, larger means quieter
SILENT = 1000
ERROR = 900
NORMAL = 700
VERBOSE = 500
TEST = 400
DEBUG = 300

RATE_CHOOSE: Tuple[ActionEntry, ...] = (
    _A(ActionCode.RATE, 1, ("sekündlich", "secondly")),
    _A(ActionCode.RATE, 2, ("minütlich", "minutely")),
    _A(ActionCode.RATE, 3, ("stündlich", "hourly", "horaire", "ogni-ora", "por-hora", "cada-hora")),
    _A(ActionCode.RATE, 4, ("täglich", "dayly", "daily", "quotidien", "giornaliero", "por-día", "por-dia")),
    _A(ActionCode.RATE, 5, ("wöchentlich", "weekly", "hebdomadaire", "settimanale", "semanal")),
)

# UTC itself, kept addressable for callers defaulting to offset 0
ACTION_TZ0 = _A(_TZO, 0, ("GMT", "UT", "UTC", "WET"))

TIME_CHOOSE: Tuple[ActionEntry, ...] = (
    _A(_TOD, 1, ("AM", "vormittags", "matinée", "matinee", "a.m.", "antimeridiano",
                "del-mattino", "de-la-mañana", "de-la-manana")),
    _A(_TOD, 3, ("PM", "nachmittags", "l'après-midi", "l'apres-midi", "del-pomeriggio",
                "de-la-tarde", "después-del-mediodía", "despues-del-mediodia")),
    _A(_TOD, 4, ("Tagesende", "end-of-day", "fin-du-jour")),
    _A(_TOD, 2, ("Mittag", "noon", "midi", "mezzogiorno", "mediodía", "mediodia")),
    _A(_TOD, 0, ("Mitternacht", "midnight", "minuit", "mezzanotte", "medianoche")),

    _A(_DAY, 0, ("heute", "today", "aujourd'hui", "oggigiorno", "hoy-día", "hoy-dia")),
    _A(_DAY, 1, ("morgen", "tomorrow", "demain", "domani", "mañana", "manana")),
    _A(_DAY, -1, ("gestern", "yesterday", "hier", "ieri", "ayer")),
    _A(_DAY, -2, ("vorgestern", "beforeyesterday", "avant-hier", "anteayer")),
    _A(_DAY, -3, ("vorvorgestern", "three-days-ago")),

    _A(ActionCode.DATE, 0, ("jetzt", "now", "maintenant", "adesso", "ahora")),  # [10]

    _A(_WD, 0, ("Sonntag", "Sunday", "dimanche", "domenica", "domingo", "zondag")),
    _A(_WD, 1, ("Montag", "Monday", "lundi", "lunedì", "lunes", "maandag", "Segunda-feira")),
    _A(_WD, 2, ("Dienstag", "Tuesday", "mardi", "martedì", "martes", "dinsdag",
               "Terça-feira", "Terca-feira")),
    _A(_WD, 3, ("Mittwoch", "Wednesday", "mercredi", "mercoledì", "mercoledi", "miércoles",
               "miercoles", "woensdag", "Quarta-feira")),
    _A(_WD, 4, ("Donnerstag", "Thursday", "jeudi", "giovedì", "jueves", "donderdag",
               "Quinta-feira")),
    _A(_WD, 5, ("Freitag", "Friday", "vendredi", "venerdì", "viernes", "vrijdag", "Sexta-feira")),
    _A(_WD, 6, ("Samstag", "Saturday", "samedi", "sabato", "sábado", "sabado", "zaterdag")),

    _A(_MON, 1, ("Januar", "January", "janvier", "gennaio", "enero", "januari", "Janeiro")),
    _A(_MON, 2, ("Februar", "February", "février", "fevrier", "febbraio", "febrero",
                "februari", "Fevereiro")),
    _A(_MON, 3, ("März", "Maerz", "Mrz", "March", "mars", "marzo", "maart", "mrt", "Março", "Marco")),
    _A(_MON, 4, ("April", "avril", "april", "aprile", "abril")),
    _A(_MON, 5, ("Mai", "May", "mai", "maggio", "mayo", "mei", "Maio")),
    _A(_MON, 6, ("Juni", "June", "juin", "giugno", "junio", "Junho")),
    _A(_MON, 7, ("Juli", "July", "juillet", "luglio", "julio", "Julho")),
    _A(_MON, 8, ("August", "août", "aout", "agosto", "augustus")),
    _A(_MON, 9, ("September", "septembre", "settembre", "septiembre", "Setembro")),
    _A(_MON, 10, ("Oktober", "October", "octobre", "ottobre", "octubre", "Outubro")),
    _A(_MON, 11, ("November", "novembre", "noviembre", "Novembro")),
    _A(_MON, 12, ("Dezember", "December", "décembre", "decembre", "dicembre", "diciembre",
                 "Dezembro")),

    # time zone abbreviations, value is the offset in minutes
    ACTION_TZ0,
    _A(_TZO, 60, ("CET", "MEZ", "BST", "WAT", "IST", "WEST")),  # [31]
    _A(_TZO, 2 * 60, ("MESZ", "CEST", "EET", "CAT", "SAST")),
    _A(_TZO, 3 * 60, ("MSK", "EEST", "CEMT", "EAT")),
    _A(_TZO, 3 * 60 + 30, ("IRST",)),
    _A(_TZO, 4 * 60, ("MSD", "AZT")),
    _A(_TZO, -(2 * 60 + 30), ("NDT",)),
    _A(_TZO, -(3 * 60 + 30), ("NST",)),
    _A(_TZO, -4 * 60, ("AST", "EDT", "BOT", "CLT", "FKT", "GYT")),
    _A(_TZO, -5 * 60, ("EST", "CDT", "ACT", "COT", "PET")),
    _A(_TZO, -6 * 60, ("CST", "MDT", "GALT")),
    _A(_TZO, -7 * 60, ("MST", "PDT")),
    _A(_TZO, -8 * 60, ("PST", "AKDT")),
    _A(_TZO, -9 * 60, ("AKST",)),
    _A(_TZO, -10 * 60, ("HST", "TAHT", "HAST")),
    _A(_TZO, -11 * 60, ("SST",)),
    _A(_TZO, -4 * 60 + 30, ("VET",)),
    _A(_TZO, -3 * 60, ("ART", "BRT", "GFT", "NFT", "WGT", "SRT", "UYT")),
    _A(_TZO, -2 * 60, ("FNT",)),
    _A(_TZO, -1 * 60, ("AZOT", "CVT", "EGT")),
    _A(_TZO, 4 * 60 + 30, ("AFT", "GET", "MUT", "SCT")),
    _A(_TZO, 5 * 60, ("AQTT", "ORAT", "TMT")),
    _A(_TZO, 5 * 60 + 45, ("NPT",)),
    _A(_TZO, 6 * 60, ("ALMT", "BTT", "CCT", "IOT", "KGT", "NOVT", "OMST", "BDT")),
    _A(_TZO, 7 * 60, ("ICT", "WIT", "CXT")),
    _A(_TZO, 8 * 60, ("IRKT", "ULAT", "HKT", "MYT", "SGT")),
    _A(_TZO, 8 * 60 + 45, ("CWST",)),
    _A(_TZO, 9 * 60, ("CHOT", "EIT", "JST", "KST", "PWT")),
    _A(_TZO, 10 * 60, ("ChsT", "PGT", "SAKT")),
    _A(_TZO, 11 * 60, ("KOST", "NCT", "SBT")),
    _A(_TZO, 12 * 60, ("FJT", "GILT", "NRT", "NZST", "TVT")),
    _A(_TZO, 12 * 60 + 45, ("CHAST", "MHT")),
)

COLOR_CHOOSE: Tuple[ActionEntry, ...] = (
    _A(ActionCode.COLOR, 0xFF0000, ("red", "rot", "rt", "rouge")),
    _A(ActionCode.COLOR, 0x00FF00, ("green", "grün", "gruen", "gn", "vert", "lime")),
    # "bl" first and exact, "bla" stays ambiguous with black
    _A(ActionCode.COLOR, 0x0000FF, ("bl", "blue", "blau", "bleu")),
    _A(ActionCode.COLOR, 0x000000, ("black", "schwarz", "sw", "noir", "bk")),
    _A(ActionCode.COLOR, 0xFFFFFF, ("white", "weiß", "weiss", "ws", "blanche", "wt")),
    _A(ActionCode.COLOR, 0xFFFF00, ("yellow", "ge", "gelb", "jaune")),
    _A(ActionCode.COLOR, 0x808080, ("gray", "gr", "grau", "gris")),
    _A(ActionCode.COLOR, 0xC0C0C0, ("silver", "silbern", "argent")),
    _A(ActionCode.COLOR, 0xFF00FF, ("magenta", "fuchsia", "lavendel", "purpurrot")),
    _A(ActionCode.COLOR, 0x00FFFF, ("aqua", "cyan", "blaugrün")),
    _A(ActionCode.COLOR, 0x808000, ("olive", "olivgrün")),
    _A(ActionCode.COLOR, 0x800000, ("maroon", "weinrot", "kastanienbraun")),
    _A(ActionCode.COLOR, 0x800080, ("purple", "violet", "flieder")),
    _A(ActionCode.COLOR, 0x008080, ("teal", "mintgrün")),
    _A(ActionCode.COLOR, 0x008000, ("dunkelgrün", "dgn", "darkgreen", "dark_green")),
    _A(ActionCode.COLOR, 0x000080, ("navy", "dunkelblau", "dbl")),
    _A(ActionCode.COLOR, 0x000080, ("nightblue", "nachtblau", "nbl")),
    _A(ActionCode.COLOR, 0xFFC0CB, ("rosa", "pink", "rosarot", "rose")),
    _A(ActionCode.COLOR, 0x4B0082, ("indigo",)),
)

LEVEL_CHOOSE: Tuple[ActionEntry, ...] = (
    _A(ActionCode.VERBOSITY, NORMAL, ("normal", "default", "false", "config", "700")),
    _A(ActionCode.VERBOSITY, SILENT, ("silent", "severe", "off", "aus", "none", "keine", "1000")),
    _A(ActionCode.VERBOSITY, ERROR, ("error", "Fehler", "warning", "900")),
    _A(ActionCode.VERBOSITY, VERBOSE, ("verbose", "ausführlich", "fine", "500")),
    _A(ActionCode.VERBOSITY, TEST, ("test", "finer", "true", "400")),
    _A(ActionCode.VERBOSITY, DEBUG, ("debug", "finest", "300")),
)


def parse_color(token: Optional[str]) -> Optional[int]:
    """0xRRGGBB for a color name, None if unknown or ambiguous."""
    entry = resolve(COLOR_CHOOSE, token.strip() if token else token)
    return entry.value if entry else None


def parse_verbosity(token: Optional[str], default: int = NORMAL) -> int:
    entry = resolve(LEVEL_CHOOSE, token.strip() if token else token)
    return entry.value if entry else default


def parse_rate(token: Optional[str]) -> Optional[int]:
    entry = resolve(RATE_CHOOSE, token.strip() if token else token)
    return entry.value if entry else None
