from polytranslate.language.matcher import match_language
from polytranslate.language.table import (
    LANGUAGE_INDEX,
    LANGUAGE_TABLE,
    UNKNOWN_LANGUAGE,
    LanguageEntry,
    build_language_index,
)


def test_index_keeps_first_row_of_each_family() -> None:
    table = [
        LanguageEntry("en", "English"),
        LanguageEntry("en-US", "English (United States)"),
        LanguageEntry("en", "English again"),
    ]
    assert build_language_index(table) == {"en": 0}


def test_index_uses_full_code_for_regional_first_rows() -> None:
    table = [
        LanguageEntry("az-AZ", "Azeri (Cyrillic) (Azerbaijan)"),
        LanguageEntry("az", "Azeri (Latin)"),
        LanguageEntry("az-AZ", "Azeri (Latin) (Azerbaijan)"),
    ]
    index = build_language_index(table)
    assert index == {"az-AZ": 0, "az": 1}


def test_reference_table_quirks_are_preserved() -> None:
    assert len(LANGUAGE_TABLE) == 300
    assert LANGUAGE_TABLE[LANGUAGE_INDEX["az"]].name == "Azeri (Latin)"
    # Nynorsk only has a regional row, so its base code never reaches the index.
    assert "nn" not in LANGUAGE_INDEX
    assert match_language("nn-NO") == UNKNOWN_LANGUAGE


def test_hebrew_aliases_are_independent_keys() -> None:
    assert match_language("he") == LanguageEntry("he", "Hebrew")
    assert match_language("iw") == LanguageEntry("iw", "Hebrew")
