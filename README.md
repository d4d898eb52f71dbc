# glyphnorm

Unicode script detection and small normalizers for preparing single words
(lemmas) before they are indexed or searched. Pure Python, no dependencies.

## Install

    pip install glyphnorm

## Detecting scripts

`glyphnorm.chars` has one predicate per writing system, each testing a single
character against that script's Unicode ranges: `is_latin`, `is_cyrillic`,
`is_arabic`, `is_devanagari`, `is_ethiopic`, `is_hebrew`, `is_georgian`,
`is_mandarin`, `is_bengali`, `is_hiragana`, `is_katakana`, `is_hangul`,
`is_greek`, `is_kannada`, `is_tamil`, `is_thai`, `is_gujarati`,
`is_gurmukhi`, `is_telugu`, `is_malayalam`, `is_oriya`, `is_myanmar`,
`is_sinhala` and `is_khmer`.

`glyphnorm.script_language` defines two enums and one function:

- `Script` — the writing systems. Hiragana, Katakana and Han ideographs share
  `Script.CJ`, whose label is `"Mandarin"`. `Script.label()` returns the
  name; `Script.from_label(label)` looks a name up ignoring case and
  surrounding spaces (`"hiragana"` and `"katakana"` also give `Script.CJ`).
- `Language` — languages by ISO 639-3 code. `Language.code()` returns the
  code; `Language.from_code(code)` looks one up ignoring case and surrounding
  spaces.
- `script_of_char(ch)` — the `Script` of one character. The predicates are
  tried in a fixed order, Latin first, so a character is given the first
  script that claims it.

Unknown labels, codes and characters give `Script.OTHER` or
`Language.OTHER`, whose label and code are `"other"`.

    from glyphnorm.script_language import Language, Script, script_of_char

    script_of_char("ж")           # Script.CYRILLIC
    script_of_char("ひ")          # Script.CJ
    Script.CJ.label()             # "Mandarin"
    Script.from_label("Latin")    # Script.LATIN
    Language.ENG.code()           # "eng"
    Language.from_code("jpn")     # Language.JPN

## Normalizing

Every normalizer has `should_normalize(lemma, script)`, which says whether it
applies to a word of the given `Script`, and `normalize(lemma)`.

The character-level normalizers also have `normalize_char(c)`, returning the
replacement text for one character, or `None` if the character is dropped.
Their `normalize(lemma)` returns a pair `(text, char_map)`: the normalized
word, and for each original character a pair of its UTF-8 length and the
UTF-8 length of what replaced it (0 when it was dropped).

| Normalizer | Module | `should_normalize` is true for | What it does |
|---|---|---|---|
| `ArabicNormalizer` | `glyphnorm.arabic` | Arabic words holding ـ, ٱ, ى or ة | drops Tatweel; ٱ → ا, ى → ي, ة → ه |
| `CompatibilityDecompositionNormalizer` | `glyphnorm.compatibility` | any word that is neither ASCII nor already NFKD | decomposes each character to NFKD |
| `ControlCharNormalizer` | `glyphnorm.control_char` | any word holding a non-whitespace control character | removes control characters, keeping tab, newline and other whitespace controls |
| `LowercaseNormalizer` | `glyphnorm.lowercase` | Latin, Cyrillic, Greek or Georgian words holding an uppercase letter | lowercases each character |
| `QuoteNormalizer` | `glyphnorm.quote` | Latin words holding ’, ‘ or ‛ | replaces those marks with `'` |
| `VietnameseNormalizer` | `glyphnorm.vietnamese` | Latin words holding Ð, Đ or đ | turns Ð, Đ and đ into `d` and drops every other character |
| `GreekNormalizer` | `glyphnorm.greek` | Greek words | turns a trailing ς into σ |

`GreekNormalizer` has no `normalize_char`; its `normalize` returns only the
new text, since the replacement keeps every length unchanged.

    from glyphnorm.lowercase import LowercaseNormalizer
    from glyphnorm.script_language import Script

    norm = LowercaseNormalizer()
    if norm.should_normalize("PascalCase", Script.LATIN):
        text, char_map = norm.normalize("PascalCase")
        print(text)        # pascalcase
        print(char_map)    # [(1, 1), (1, 1), ...]

## What it does not do

glyphnorm works on one word at a time and on one character at a time. It has
no tokenizer or segmenter for running text, does not detect the script or
language of a whole text (`Script` and `Language` are identifiers only), and
has no pipeline that runs the normalizers in sequence or combines their
character maps; the caller decides which normalizers to apply and in what
order. There are no normalizers for Chinese or Japanese text, and none that
removes nonspacing marks. There is no command-line program.

## Running the tests

    pip install -e ".[test]"
    pytest