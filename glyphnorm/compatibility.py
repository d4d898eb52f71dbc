"""Normalization to Unicode compatibility decomposition (NFKD)."""

from __future__ import annotations

import unicodedata
from typing import List, Optional, Tuple

from glyphnorm.script_language import Script


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


class CompatibilityDecompositionNormalizer:
    """Decomposes each character to its NFKD form."""

    def normalize_char(self, c: str) -> Optional[str]:
        """Return the NFKD form of ``c``, or None if it decomposes to nothing."""
        return unicodedata.normalize("NFKD", c) or None

    def should_normalize(self, lemma: str, script: Script) -> bool:
        """Return True unless the text is ASCII or already in NFKD form."""
        return not (lemma.isascii() or unicodedata.is_normalized("NFKD", lemma))

    def normalize(self, lemma: str) -> Tuple[str, List[Tuple[int, int]]]:
        """Normalize ``lemma``.

        Returns the new text and, for each original character, the pair of
        its UTF-8 length and the UTF-8 length of what replaced it.
        """
        pieces = [(c, self.normalize_char(c)) for c in lemma]
        text = "".join(p for _, p in pieces if p)
        char_map = [(_utf8_len(c), _utf8_len(p or "")) for c, p in pieces]
        return text, char_map