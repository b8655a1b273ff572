from polytranslate.language.iso import (
    ISO639_3_TO_1,
    MACROLANGUAGE_MAP,
    build_macrolanguage_map,
    normalize_iso639_3,
)


def test_macrolanguage_map_flattens_groupings() -> None:
    groupings = {
        "zho": [{"cmn": {"name": "Mandarin Chinese"}}, {"yue": {"name": "Yue Chinese"}}],
        "ara": [{"arz": {"name": "Egyptian Arabic"}}],
    }
    assert build_macrolanguage_map(groupings) == {"cmn": "zho", "yue": "zho", "arz": "ara"}


def test_macrolanguage_map_last_grouping_wins() -> None:
    groupings = {"aaa": [{"xxx": {}}], "bbb": [{"xxx": {}}]}
    assert build_macrolanguage_map(groupings) == {"xxx": "bbb"}


def test_bundled_tables_cover_common_languages() -> None:
    assert ISO639_3_TO_1["fra"] == "fr"
    assert ISO639_3_TO_1["zho"] == "zh"
    assert MACROLANGUAGE_MAP["cmn"] == "zho"
    assert MACROLANGUAGE_MAP["pes"] == "fas"


def test_normalize_direct_mapping() -> None:
    assert normalize_iso639_3("fra") == "fr"
    assert normalize_iso639_3("deu") == "de"
    assert normalize_iso639_3("nob") == "nb"


def test_normalize_falls_back_through_macrolanguage() -> None:
    assert normalize_iso639_3("cmn") == "zh"
    assert normalize_iso639_3("arb") == "ar"
    assert normalize_iso639_3("pes") == "fa"
    assert normalize_iso639_3("ekk") == "et"


def test_normalize_prefers_direct_mapping_over_macrolanguage() -> None:
    alpha_table = {"aaa": "xx", "bbb": "yy"}
    macro_map = {"aaa": "bbb"}
    assert normalize_iso639_3("aaa", alpha_table, macro_map) == "xx"


def test_normalize_unknown_code() -> None:
    assert normalize_iso639_3("qqq") is None
    assert normalize_iso639_3("") is None
    assert normalize_iso639_3("ccc", {"aaa": "xx"}, {"ccc": "zzz"}) is None
