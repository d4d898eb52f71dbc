"""Lowercasing of cased scripts."""

from __future__ import annotations

from typing import List, Optional, Tuple

from glyphnorm.script_language import Script

_CASED_SCRIPTS = frozenset({Script.LATIN, Script.CYRILLIC, Script.GREEK, Script.GEORGIAN})


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


class LowercaseNormalizer:
    """Lowercases characters of scripts that have letter case."""

    def normalize_char(self, c: str) -> Optional[str]:
        """Return the lowercase form of ``c``, or None if it lowercases to nothing."""
        return c.lower() or None

    def should_normalize(self, lemma: str, script: Script) -> bool:
        """Return True for cased-script text holding an uppercase character."""
        return script in _CASED_SCRIPTS and any(c.isupper() for c in lemma)

    def normalize(self, lemma: str) -> Tuple[str, List[Tuple[int, int]]]:
        """Normalize ``lemma``.

        Returns the new text and, for each original character, the pair of
        its UTF-8 length and the UTF-8 length of what replaced it.
        """
        pieces = [(c, self.normalize_char(c)) for c in lemma]
        text = "".join(p for _, p in pieces if p)
        char_map = [(_utf8_len(c), _utf8_len(p or "")) for c, p in pieces]
        return text, char_map