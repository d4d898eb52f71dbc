import pytest

from glyphnorm.lowercase import LowercaseNormalizer
from glyphnorm.script_language import Script


def test_pascal_case_is_lowercased():
    text, char_map = LowercaseNormalizer().normalize("PascalCase")
    assert text == "pascalcase"
    assert char_map == [(1, 1)] * 10


def test_normalize_char():
    normalizer = LowercaseNormalizer()
    assert normalizer.normalize_char("P") == "p"
    assert normalizer.normalize_char("p") == "p"
    assert normalizer.normalize_char("Ж") == "ж"


def test_normalize_is_idempotent():
    normalizer = LowercaseNormalizer()
    once, _ = normalizer.normalize("ÀÉÎõÜ Ωμέγα Жук")
    twice, _ = normalizer.normalize(once)
    assert once == twice


def test_char_map_matches_lengths():
    lemma = "ÀÉÎ Жук"
    text, char_map = LowercaseNormalizer().normalize(lemma)
    assert len(char_map) == len(lemma)
    assert sum(original for original, _ in char_map) == len(lemma.encode("utf-8"))
    assert sum(new for _, new in char_map) == len(text.encode("utf-8"))


@pytest.mark.parametrize(
    "script", [Script.LATIN, Script.CYRILLIC, Script.GREEK, Script.GEORGIAN]
)
def test_should_normalize_cased_scripts(script):
    assert LowercaseNormalizer().should_normalize("PascalCase", script) is True


def test_should_not_normalize_lowercase_text():
    assert LowercaseNormalizer().should_normalize("pascalcase", Script.LATIN) is False


def test_should_not_normalize_uncased_script():
    assert LowercaseNormalizer().should_normalize("PascalCase", Script.ARABIC) is False