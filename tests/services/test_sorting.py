import pytest

from polytranslate.services.sorting import (
    BASELINE_PRIORITY,
    DEFAULT_PRIORITIES,
    effective_priority,
    get_sorted_services_with_priorities,
)

FREE = ["bing", "cnki", "deeplx", "google", "googleapi", "haici", "youdao"]
CONFIGURED = ["deeplcustom", "libretranslate", "mtranserver", "pot"]
CUSTOM = ["customgpt1", "customgpt2", "customgpt3"]


def _ids(services) -> list[str]:
    return [service.id for service in services]


def test_sentence_services_follow_default_tiers() -> None:
    ordered = _ids(get_sorted_services_with_priorities("sentence", {}))
    assert ordered[: len(FREE)] == FREE
    assert ordered[len(FREE) : len(FREE) + len(CONFIGURED)] == CONFIGURED
    assert ordered[-len(CUSTOM) :] == CUSTOM
    baseline = ordered[len(FREE) + len(CONFIGURED) : -len(CUSTOM)]
    assert baseline == sorted(baseline)
    assert "baidu" in baseline and "tencent" in baseline


def test_sorting_is_stable_between_calls() -> None:
    first = _ids(get_sorted_services_with_priorities("sentence", {}))
    second = _ids(get_sorted_services_with_priorities("sentence", {}))
    assert first == second


def test_word_services_sort_by_id_at_baseline() -> None:
    ordered = _ids(get_sorted_services_with_priorities("word"))
    assert ordered == [
        "bingdict",
        "cambridgedict",
        "collinsdict",
        "freedictionaryapi",
        "haicidict",
        "webliodict",
        "youdaodict",
    ]


def test_overrides_take_precedence_over_defaults() -> None:
    ordered = _ids(get_sorted_services_with_priorities("sentence", {"claude": 500, "google": 1}))
    assert ordered[0] == "claude"
    assert ordered[-1] == "google"


def test_none_override_falls_back_to_default() -> None:
    assert effective_priority("google", {"google": None}) == DEFAULT_PRIORITIES["google"]
    assert effective_priority("baidu", {}) == BASELINE_PRIORITY
    assert effective_priority("baidu", {"baidu": 0}) == 0


def test_overrides_for_other_type_do_not_leak() -> None:
    ordered = _ids(get_sorted_services_with_priorities("word", {"google": 999}))
    assert "google" not in ordered


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        get_sorted_services_with_priorities("phrase")
