"""Folding of typographic high quotation marks into an apostrophe."""

from __future__ import annotations

from typing import List, Optional, Tuple

from glyphnorm.script_language import Script

_HIGH_QUOTES = frozenset("\u2019\u2018\u201b")


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


class QuoteNormalizer:
    """Replaces high quotation marks in Latin text with a single quote."""

    def normalize_char(self, c: str) -> Optional[str]:
        """Return an apostrophe for a high quotation mark, else ``c`` unchanged."""
        return "'" if c in _HIGH_QUOTES else c

    def should_normalize(self, lemma: str, script: Script) -> bool:
        """Return True for Latin text holding a high quotation mark."""
        return script is Script.LATIN and any(c in _HIGH_QUOTES for c in lemma)

    def normalize(self, lemma: str) -> Tuple[str, List[Tuple[int, int]]]:
        """Normalize ``lemma``.

        Returns the new text and, for each original character, the pair of
        its UTF-8 length and the UTF-8 length of what replaced it.
        """
        pieces = [(c, self.normalize_char(c)) for c in lemma]
        text = "".join(p for _, p in pieces if p)
        char_map = [(_utf8_len(c), _utf8_len(p or "")) for c, p in pieces]
        return text, char_map