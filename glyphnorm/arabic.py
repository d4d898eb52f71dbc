"""Normalization of Arabic text: tatweel removal and letter folding."""

from __future__ import annotations

from typing import List, Optional, Tuple

from glyphnorm.script_language import Script

_TATWEEL = "\u0640"
_REPLACEMENTS = {
    "\u0671": "\u0627",  # alef wasla -> alef
    "\u0649": "\u064a",  # alef maksura -> yeh
    "\u0629": "\u0647",  # taa marbuta -> heh
}
_AFFECTED = frozenset(_REPLACEMENTS) | {_TATWEEL}


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


class ArabicNormalizer:
    """Removes tatweel and folds alef wasla, alef maksura and taa marbuta."""

    def normalize_char(self, c: str) -> Optional[str]:
        """Return the replacement for ``c``, or None if it is to be removed."""
        if c == _TATWEEL:
            return None
        return _REPLACEMENTS.get(c, c)

    def should_normalize(self, lemma: str, script: Script) -> bool:
        """Return True for Arabic text holding a character this normalizer changes."""
        return script is Script.ARABIC and any(c in _AFFECTED for c in lemma)

    def normalize(self, lemma: str) -> Tuple[str, List[Tuple[int, int]]]:
        """Normalize ``lemma``.

        Returns the new text and, for each original character, the pair of
        its UTF-8 length and the UTF-8 length of what replaced it.
        """
        pieces = [(c, self.normalize_char(c)) for c in lemma]
        text = "".join(p for _, p in pieces if p)
        char_map = [(_utf8_len(c), _utf8_len(p or "")) for c, p in pieces]
        return text, char_map