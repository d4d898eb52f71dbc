"""Folding of the barred and eth letter d in Latin text."""

from __future__ import annotations

from typing import List, Optional, Tuple

from glyphnorm.script_language import Script

# Used in Vietnamese and in several European alphabets.
_D_VARIANTS = frozenset("\u00d0\u0110\u0111")


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


class VietnameseNormalizer:
    """Maps Ð, Đ and đ to ``d``; every other character is dropped."""

    def normalize_char(self, c: str) -> Optional[str]:
        """Return ``"d"`` for a d variant, otherwise None."""
        return "d" if c in _D_VARIANTS else None

    def should_normalize(self, lemma: str, script: Script) -> bool:
        """Return True for Latin text holding one of the d variants."""
        return script is Script.LATIN and any(c in _D_VARIANTS for c in lemma)

    def normalize(self, lemma: str) -> Tuple[str, List[Tuple[int, int]]]:
        """Normalize ``lemma``.

        Returns the new text and, for each original character, the pair of
        its UTF-8 length and the UTF-8 length of what replaced it.
        """
        pieces = [(c, self.normalize_char(c)) for c in lemma]
        text = "".join(p for _, p in pieces if p)
        char_map = [(_utf8_len(c), _utf8_len(p or "")) for c, p in pieces]
        return text, char_map