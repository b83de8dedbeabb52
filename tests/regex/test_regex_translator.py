import itertools

import pytest

from dialectkit import AdsDialect, InvalidPatternError, RegexTranslator, TranslatedRegex
from dialectkit.regex import escape_posix_literal


@pytest.fixture
def translator():
    return RegexTranslator()


def test_translate_strips_flag_group(translator):
    assert translator.translate("(?i)^foo.*") == TranslatedRegex("^foo.*", "i")


def test_translate_without_flags_passes_through(translator):
    assert translator.translate("^a[bc]+$") == TranslatedRegex("^a[bc]+$", "")


def test_translate_deduplicates_flags(translator):
    assert translator.translate("(?ii)a").flags == "i"


def test_translate_rewrites_literal_span(translator):
    assert translator.translate(r"x\Qa.b\Ey").pattern == r"xa\.by"


def test_translate_rewrites_every_literal_span(translator):
    assert translator.translate(r"\Q.\E-\Q*\E").pattern == r"\.-\*"


def test_translate_unterminated_span_runs_to_end(translator):
    assert translator.translate(r"x\Q(y").pattern == r"x\(y"


def test_translate_keeps_backslash_literal_inside_span(translator):
    assert translator.translate(r"\Qa\b\E").pattern == r"a\\b"


def test_escaped_backslash_does_not_open_span(translator):
    assert translator.translate(r"\\Q").pattern == r"\\Q"


@pytest.mark.parametrize("pattern", ["[abc", "(?s)abc", "(?x", "a**", "a{4294967296}"])
def test_translate_rejects(translator, pattern):
    with pytest.raises(InvalidPatternError) as excinfo:
        translator.translate(pattern)
    assert excinfo.value.pattern == pattern


def test_matchers_are_shared():
    assert RegexTranslator().FLAGS_PATTERN is RegexTranslator().FLAGS_PATTERN


def test_escape_posix_literal():
    assert escape_posix_literal("a.b*c") == r"a\.b\*c"


@pytest.mark.parametrize(
    "letters",
    [
        "".join(combo)
        for size in (1, 2, 3)
        for subset in itertools.combinations("icm", size)
        for combo in itertools.permutations(subset)
    ],
)
def test_flag_suffix_follows_canonical_order(letters):
    result = AdsDialect().generate_regular_expression("col", f"(?{letters})ab")
    expected = "".join(letter for letter in "icm" if letter in letters)
    assert result == f"REGEXP_LIKE(col, 'ab', '{expected}')"
    assert "(?" not in result
