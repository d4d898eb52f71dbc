from glyphnorm.quote import QuoteNormalizer
from glyphnorm.script_language import Script


def test_high_quotes_are_folded():
    text, char_map = QuoteNormalizer().normalize("l'l’l‘l‛")
    assert text == "l'l'l'l'"
    assert char_map == [(1, 1), (1, 1), (1, 1), (3, 1), (1, 1), (3, 1), (1, 1), (3, 1)]


def test_normalize_char():
    normalizer = QuoteNormalizer()
    assert normalizer.normalize_char("’") == "'"
    assert normalizer.normalize_char("‘") == "'"
    assert normalizer.normalize_char("‛") == "'"
    assert normalizer.normalize_char("l") == "l"


def test_should_normalize():
    normalizer = QuoteNormalizer()
    assert normalizer.should_normalize("l'l’l‘l‛", Script.LATIN) is True
    assert normalizer.should_normalize("l'l", Script.LATIN) is False
    assert normalizer.should_normalize("l’l", Script.CYRILLIC) is False


def test_character_count_is_preserved():
    lemma = "it’s ‘quoted‛"
    text, char_map = QuoteNormalizer().normalize(lemma)
    assert len(text) == len(lemma)
    assert len(char_map) == len(lemma)