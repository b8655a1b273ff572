import pytest

from polytranslate.language.matcher import base_code, match_language
from polytranslate.language.table import LANGUAGE_TABLE, UNKNOWN_LANGUAGE, LanguageEntry

BARE_TWO_LETTER_CODES = sorted({entry.code for entry in LANGUAGE_TABLE if len(entry.code) == 2})


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("en-US", "en"), ("zh_TW", "zh"), ("PT-br", "pt"), ("fr", "fr"), ("sr-Latn-RS", "sr"), ("", "")],
)
def test_base_code(raw: str, expected: str) -> None:
    assert base_code(raw) == expected


def test_every_two_letter_code_matches_case_insensitively() -> None:
    assert BARE_TWO_LETTER_CODES
    for code in BARE_TWO_LETTER_CODES:
        entry = match_language(code)
        assert entry != UNKNOWN_LANGUAGE
        assert match_language(code.upper()) == entry


def test_regional_locale_resolves_to_family_entry() -> None:
    assert match_language("en-GB") == LanguageEntry("en", "English")
    assert match_language("zh_CN") == LanguageEntry("zh", "Chinese")
    assert match_language("FR-ca") == LanguageEntry("fr", "French")


@pytest.mark.parametrize("raw", ["", "xx", "klingon", "-en", "zz-ZZ"])
def test_unknown_codes_return_sentinel(raw: str) -> None:
    result = match_language(raw)
    assert result == UNKNOWN_LANGUAGE
    assert result.to_dict() == {"code": "", "name": "Unknown"}
