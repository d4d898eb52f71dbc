"""Normalization of Greek text: folding of the final sigma."""

from __future__ import annotations

from glyphnorm.script_language import Script

_FINAL_SIGMA = "\u03c2"
_SIGMA = "\u03c3"


class GreekNormalizer:
    """Replaces a word-final sigma with the ordinary sigma."""

    def should_normalize(self, lemma: str, script: Script) -> bool:
        """Return True for Greek text."""
        return script is Script.GREEK

    def normalize(self, lemma: str) -> str:
        """Return ``lemma`` with a trailing final sigma turned into an ordinary one.

        The replacement has the same length in characters and in UTF-8 bytes,
        so no character map is produced.
        """
        if lemma.endswith(_FINAL_SIGMA):
            return lemma[: -len(_FINAL_SIGMA)] + _SIGMA
        return lemma