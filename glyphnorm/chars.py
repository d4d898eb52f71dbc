"""Character classification by Unicode script block."""

from __future__ import annotations

from typing import Iterable, Tuple

_Range = Tuple[int, int]


def _within(ch: str, ranges: Iterable[_Range]) -> bool:
    code = ord(ch)
    return any(low <= code <= high for low, high in ranges)


_CYRILLIC = (
    (0x0400, 0x0484),
    (0x0487, 0x052F),
    (0x2DE0, 0x2DFF),
    (0xA640, 0xA69D),
    (0x1D2B, 0x1D2B),
    (0x1D78, 0x1D78),
    (0xA69F, 0xA69F),
)

_LATIN = (
    (ord("a"), ord("z")),
    (ord("A"), ord("Z")),
    (0x0080, 0x00FF),
    (0x0100, 0x017F),
    (0x0180, 0x024F),
    (0x0250, 0x02AF),
    (0x1D00, 0x1D7F),
    (0x1D80, 0x1DBF),
    (0x1E00, 0x1EFF),
    (0x2100, 0x214F),
    (0x2C60, 0x2C7F),
    (0xA720, 0xA7FF),
    (0xAB30, 0xAB6F),
)

_ARABIC = (
    (0x0600, 0x06FF),
    (0x0750, 0x07FF),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
    (0x10E60, 0x10E7F),
    (0x1EE00, 0x1EEFF),
)

_DEVANAGARI = ((0x0900, 0x097F), (0xA8E0, 0xA8FF), (0x1CD0, 0x1CFF))
_ETHIOPIC = ((0x1200, 0x139F), (0x2D80, 0x2DDF), (0xAB00, 0xAB2F))
_HEBREW = ((0x0590, 0x05FF),)
_GEORGIAN = ((0x10A0, 0x10FF),)

_MANDARIN = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DB5),
    (0x4E00, 0x9FCC),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
)

_BENGALI = ((0x0980, 0x09FF),)
_HIRAGANA = ((0x3040, 0x309F),)
_KATAKANA = ((0x30A0, 0x30FF),)

_HANGUL = (
    (0xAC00, 0xD7AF),
    (0x1100, 0x11FF),
    (0x3130, 0x318F),
    (0x3200, 0x32FF),
    (0xA960, 0xA97F),
    (0xD7B0, 0xD7FF),
    (0xFF00, 0xFFEF),
)

_GREEK = ((0x0370, 0x03FF),)
_KANNADA = ((0x0C80, 0x0CFF),)
_TAMIL = ((0x0B80, 0x0BFF),)
_THAI = ((0x0E00, 0x0E7F),)
_GUJARATI = ((0x0A80, 0x0AFF),)
_GURMUKHI = ((0x0A00, 0x0A7F),)
_TELUGU = ((0x0C00, 0x0C7F),)
_MALAYALAM = ((0x0D00, 0x0D7F),)
_ORIYA = ((0x0B00, 0x0B7F),)
_MYANMAR = ((0x1000, 0x109F),)
_SINHALA = ((0x0D80, 0x0DFF),)
_KHMER = ((0x1780, 0x17FF), (0x19E0, 0x19FF))


def is_cyrillic(ch: str) -> bool:
    """Return True if the character belongs to a Cyrillic block."""
    return _within(ch, _CYRILLIC)


def is_latin(ch: str) -> bool:
    """Return True if the character belongs to a Latin block."""
    return _within(ch, _LATIN)


def is_arabic(ch: str) -> bool:
    """Return True if the character belongs to an Arabic block."""
    return _within(ch, _ARABIC)


def is_devanagari(ch: str) -> bool:
    """Return True if the character belongs to a Devanagari block."""
    return _within(ch, _DEVANAGARI)


def is_ethiopic(ch: str) -> bool:
    """Return True if the character belongs to an Ethiopic block."""
    return _within(ch, _ETHIOPIC)


def is_hebrew(ch: str) -> bool:
    """Return True if the character belongs to the Hebrew block."""
    return _within(ch, _HEBREW)


def is_georgian(ch: str) -> bool:
    """Return True if the character belongs to the Georgian block."""
    return _within(ch, _GEORGIAN)


def is_mandarin(ch: str) -> bool:
    """Return True if the character is a CJK ideograph or radical."""
    return _within(ch, _MANDARIN)


def is_bengali(ch: str) -> bool:
    """Return True if the character belongs to the Bengali block."""
    return _within(ch, _BENGALI)


def is_hiragana(ch: str) -> bool:
    """Return True if the character belongs to the Hiragana block."""
    return _within(ch, _HIRAGANA)


def is_katakana(ch: str) -> bool:
    """Return True if the character belongs to the Katakana block."""
    return _within(ch, _KATAKANA)


def is_hangul(ch: str) -> bool:
    """Return True if the character belongs to a Hangul block."""
    return _within(ch, _HANGUL)


def is_greek(ch: str) -> bool:
    """Return True if the character belongs to the Greek and Coptic block."""
    return _within(ch, _GREEK)


def is_kannada(ch: str) -> bool:
    """Return True if the character belongs to the Kannada block."""
    return _within(ch, _KANNADA)


def is_tamil(ch: str) -> bool:
    """Return True if the character belongs to the Tamil block."""
    return _within(ch, _TAMIL)


def is_thai(ch: str) -> bool:
    """Return True if the character belongs to the Thai block."""
    return _within(ch, _THAI)


def is_gujarati(ch: str) -> bool:
    """Return True if the character belongs to the Gujarati block."""
    return _within(ch, _GUJARATI)


def is_gurmukhi(ch: str) -> bool:
    """Return True if the character belongs to the Gurmukhi block."""
    return _within(ch, _GURMUKHI)


def is_telugu(ch: str) -> bool:
    """Return True if the character belongs to the Telugu block."""
    return _within(ch, _TELUGU)


def is_malayalam(ch: str) -> bool:
    """Return True if the character belongs to the Malayalam block."""
    return _within(ch, _MALAYALAM)


def is_oriya(ch: str) -> bool:
    """Return True if the character belongs to the Oriya block."""
    return _within(ch, _ORIYA)


def is_myanmar(ch: str) -> bool:
    """Return True if the character belongs to the Myanmar block."""
    return _within(ch, _MYANMAR)


def is_sinhala(ch: str) -> bool:
    """Return True if the character belongs to the Sinhala block."""
    return _within(ch, _SINHALA)


def is_khmer(ch: str) -> bool:
    """Return True if the character belongs to a Khmer block."""
    return _within(ch, _KHMER)