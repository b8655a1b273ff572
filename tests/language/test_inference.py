from __future__ import annotations

from polytranslate.language.detector import LanguageDetector
from polytranslate.language.inference import infer_language
from polytranslate.language.table import UNKNOWN_LANGUAGE, LanguageEntry


class DummyDetector:
    def __init__(self, code: str) -> None:
        self.code = code
        self.calls: list[tuple[str, int]] = []

    def detect_iso639_3(self, text: str, min_length: int = 3) -> str:
        self.calls.append((text, min_length))
        return self.code


def test_infer_language_passes_minimum_length_to_detector() -> None:
    detector = DummyDetector("fra")
    result = infer_language("Bonjour", detector=detector)
    assert result == LanguageEntry("fr", "French")
    assert detector.calls == [("Bonjour", 3)]


def test_infer_language_resolves_individual_language_through_macrolanguage() -> None:
    assert infer_language("你好世界", detector=DummyDetector("cmn")) == LanguageEntry("zh", "Chinese")


def test_infer_language_returns_unknown_when_detector_is_undecided() -> None:
    assert infer_language("??", detector=DummyDetector("")) == UNKNOWN_LANGUAGE


def test_infer_language_returns_unknown_without_two_letter_code() -> None:
    assert infer_language("some text", detector=DummyDetector("qqq")) == UNKNOWN_LANGUAGE


def test_infer_language_end_to_end_french() -> None:
    detector = LanguageDetector(use_lingua=False)
    result = infer_language(
        "Bonjour tout le monde, comment allez-vous aujourd'hui?",
        detector=detector,
    )
    assert result.to_dict() == {"code": "fr", "name": "French"}
