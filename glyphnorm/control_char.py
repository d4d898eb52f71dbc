"""Removal of control characters other than whitespace."""

from __future__ import annotations

import unicodedata
from typing import List, Optional, Tuple

from glyphnorm.script_language import Script

# Control characters that carry the Unicode White_Space property.
_WHITESPACE_CONTROLS = frozenset("\t\n\x0b\x0c\r\x85")


def _is_control(c: str) -> bool:
    return unicodedata.category(c) == "Cc" and c not in _WHITESPACE_CONTROLS


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


class ControlCharNormalizer:
    """Removes control characters, keeping whitespace controls."""

    def normalize_char(self, c: str) -> Optional[str]:
        """Return ``c``, or None if it is a non-whitespace control character."""
        return None if _is_control(c) else c

    def should_normalize(self, lemma: str, script: Script) -> bool:
        """Return True if the text holds a non-whitespace control character."""
        return any(_is_control(c) for c in lemma)

    def normalize(self, lemma: str) -> Tuple[str, List[Tuple[int, int]]]:
        """Normalize ``lemma``.

        Returns the new text and, for each original character, the pair of
        its UTF-8 length and the UTF-8 length of what replaced it.
        """
        pieces = [(c, self.normalize_char(c)) for c in lemma]
        text = "".join(p for _, p in pieces if p)
        char_map = [(_utf8_len(c), _utf8_len(p or "")) for c, p in pieces]
        return text, char_map