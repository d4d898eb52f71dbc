"""Script and language identifiers and per-character script detection."""

from __future__ import annotations

from enum import Enum

from glyphnorm import chars


class Language(Enum):
    """A language identified by its ISO 639-3 code."""

    EPO = "epo"
    ENG = "eng"
    RUS = "rus"
    CMN = "cmn"
    SPA = "spa"
    POR = "por"
    ITA = "ita"
    BEN = "ben"
    FRA = "fra"
    DEU = "deu"
    UKR = "ukr"
    KAT = "kat"
    ARA = "ara"
    HIN = "hin"
    JPN = "jpn"
    HEB = "heb"
    YID = "yid"
    POL = "pol"
    AMH = "amh"
    JAV = "jav"
    KOR = "kor"
    NOB = "nob"
    DAN = "dan"
    SWE = "swe"
    FIN = "fin"
    TUR = "tur"
    NLD = "nld"
    HUN = "hun"
    CES = "ces"
    ELL = "ell"
    BUL = "bul"
    BEL = "bel"
    MAR = "mar"
    KAN = "kan"
    RON = "ron"
    SLV = "slv"
    HRV = "hrv"
    SRP = "srp"
    MKD = "mkd"
    LIT = "lit"
    LAV = "lav"
    EST = "est"
    TAM = "tam"
    VIE = "vie"
    URD = "urd"
    THA = "tha"
    GUJ = "guj"
    UZB = "uzb"
    PAN = "pan"
    AZE = "aze"
    IND = "ind"
    TEL = "tel"
    PES = "pes"
    MAL = "mal"
    ORI = "ori"
    MYA = "mya"
    NEP = "nep"
    SIN = "sin"
    KHM = "khm"
    TUK = "tuk"
    AKA = "aka"
    ZUL = "zul"
    SNA = "sna"
    AFR = "afr"
    LAT = "lat"
    SLK = "slk"
    CAT = "cat"
    TGL = "tgl"
    HYE = "hye"
    OTHER = "other"

    def code(self) -> str:
        """Return the language code, or "other" for an unknown language."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Look up a language by code; unknown codes give ``Language.OTHER``."""
        try:
            return cls(code.strip().lower())
        except ValueError:
            return cls.OTHER


class Script(Enum):
    """A writing system; Chinese and Japanese share ``Script.CJ``."""

    ARABIC = "Arabic"
    ARMENIAN = "Armenian"
    BENGALI = "Bengali"
    CYRILLIC = "Cyrillic"
    DEVANAGARI = "Devanagari"
    ETHIOPIC = "Ethiopic"
    GEORGIAN = "Georgian"
    GREEK = "Greek"
    GUJARATI = "Gujarati"
    GURMUKHI = "Gurmukhi"
    HANGUL = "Hangul"
    HEBREW = "Hebrew"
    KANNADA = "Kannada"
    KHMER = "Khmer"
    LATIN = "Latin"
    MALAYALAM = "Malayalam"
    MYANMAR = "Myanmar"
    ORIYA = "Oriya"
    SINHALA = "Sinhala"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    THAI = "Thai"
    CJ = "Mandarin"
    OTHER = "other"

    def label(self) -> str:
        """Return the script's display name, or "other" for an unknown script."""
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Script":
        """Look up a script by name, ignoring case; unknown names give ``Script.OTHER``."""
        return _LABELS.get(label.strip().lower(), cls.OTHER)


_LABELS = {script.value.lower(): script for script in Script if script is not Script.OTHER}
_LABELS["hiragana"] = Script.CJ
_LABELS["katakana"] = Script.CJ

_CHAR_SCRIPTS = (
    (chars.is_latin, Script.LATIN),
    (chars.is_cyrillic, Script.CYRILLIC),
    (chars.is_arabic, Script.ARABIC),
    (chars.is_devanagari, Script.DEVANAGARI),
    (chars.is_hebrew, Script.HEBREW),
    (chars.is_ethiopic, Script.ETHIOPIC),
    (chars.is_georgian, Script.GEORGIAN),
    (chars.is_bengali, Script.BENGALI),
    (chars.is_hangul, Script.HANGUL),
    (chars.is_hiragana, Script.CJ),
    (chars.is_katakana, Script.CJ),
    (chars.is_mandarin, Script.CJ),
    (chars.is_greek, Script.GREEK),
    (chars.is_kannada, Script.KANNADA),
    (chars.is_tamil, Script.TAMIL),
    (chars.is_thai, Script.THAI),
    (chars.is_gujarati, Script.GUJARATI),
    (chars.is_gurmukhi, Script.GURMUKHI),
    (chars.is_telugu, Script.TELUGU),
    (chars.is_malayalam, Script.MALAYALAM),
    (chars.is_oriya, Script.ORIYA),
    (chars.is_myanmar, Script.MYANMAR),
    (chars.is_sinhala, Script.SINHALA),
    (chars.is_khmer, Script.KHMER),
)


def script_of_char(ch: str) -> Script:
    """Return the script a single character belongs to, or ``Script.OTHER``."""
    return next((script for test, script in _CHAR_SCRIPTS if test(ch)), Script.OTHER)