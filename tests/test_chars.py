import pytest

from glyphnorm import chars


def test_is_latin():
    assert chars.is_latin("z")
    assert chars.is_latin("A")
    assert chars.is_latin("č")
    assert chars.is_latin("š")
    assert chars.is_latin("Ĵ")
    assert not chars.is_latin("ж")


def test_is_cyrillic():
    assert chars.is_cyrillic("а")
    assert chars.is_cyrillic("Я")
    assert chars.is_cyrillic("Ґ")
    assert chars.is_cyrillic("ї")
    assert chars.is_cyrillic("Ꙕ")
    assert not chars.is_cyrillic("L")


def test_is_ethiopic():
    assert chars.is_ethiopic("ፚ")
    assert chars.is_ethiopic("ᎀ")
    assert not chars.is_ethiopic("а")
    assert not chars.is_ethiopic("L")


def test_is_georgian():
    assert chars.is_georgian("რ")
    assert not chars.is_georgian("ж")


def test_is_bengali():
    assert chars.is_bengali("ই")
    assert not chars.is_bengali("z")


def test_is_katakana():
    assert chars.is_katakana("カ")
    assert not chars.is_katakana("f")


def test_is_hiragana():
    assert chars.is_hiragana("ひ")
    assert not chars.is_hiragana("a")


def test_is_hangul():
    assert chars.is_hangul("ᄁ")
    assert not chars.is_hangul("t")


def test_is_greek():
    assert chars.is_greek("φ")
    assert not chars.is_greek("ф")


def test_is_kannada():
    assert chars.is_kannada("ಡ")
    assert not chars.is_kannada("S")


def test_is_tamil():
    assert chars.is_tamil("ஐ")
    assert not chars.is_tamil("Ж")


def test_is_thai():
    assert chars.is_thai("ก")
    assert chars.is_thai("๛")
    assert not chars.is_thai("Ж")


def test_is_gujarati():
    assert chars.is_gujarati("ઁ")
    assert chars.is_gujarati("૱")
    assert not chars.is_gujarati("Ж")


def test_is_gurmukhi():
    assert chars.is_gurmukhi("ਁ")
    assert chars.is_gurmukhi("ੴ")
    assert not chars.is_gurmukhi("Ж")


def test_is_telugu():
    assert chars.is_telugu("ఁ")
    assert chars.is_telugu("౿")
    assert not chars.is_telugu("Ж")


def test_is_oriya():
    assert chars.is_oriya("ଐ")
    assert chars.is_oriya("୷")
    assert not chars.is_oriya("౿")


def test_is_hebrew():
    assert chars.is_hebrew("א")
    assert chars.is_hebrew("ת")
    assert chars.is_hebrew("ׇ")
    assert not chars.is_hebrew("s")


@pytest.mark.parametrize(
    "func, inside, outside",
    [
        (chars.is_arabic, "ب", "b"),
        (chars.is_devanagari, "क", "k"),
        (chars.is_mandarin, "中", "z"),
        (chars.is_malayalam, "മ", "m"),
        (chars.is_myanmar, "က", "k"),
        (chars.is_sinhala, "ක", "k"),
        (chars.is_khmer, "ក", "k"),
    ],
)
def test_other_blocks(func, inside, outside):
    assert func(inside)
    assert not func(outside)


def test_range_edges():
    assert chars.is_mandarin("\u9fcc")
    assert not chars.is_mandarin("\u9fcd")
    assert not chars.is_mandarin("\u2e9a")
    assert chars.is_cyrillic("\u0484")
    assert not chars.is_cyrillic("\u0485")
    assert chars.is_arabic("\U0001ee00")


def test_rejects_multi_character_strings():
    with pytest.raises(TypeError):
        chars.is_latin("ab")