import pytest

from polytranslate.language.detector import LanguageDetector, to_iso639_3


@pytest.fixture(scope="module")
def detector() -> LanguageDetector:
    return LanguageDetector(use_lingua=False)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [("fr", "fra"), ("de", "deu"), ("zh-cn", "zho"), ("", ""), (None, "")],
)
def test_to_iso639_3(tag, expected) -> None:
    assert to_iso639_3(tag) == expected


def test_detect_iso639_3_skips_short_samples(detector: LanguageDetector) -> None:
    assert detector.detect_iso639_3("ab") == ""
    assert detector.detect_iso639_3("   a  ") == ""


def test_detect_iso639_3_returns_empty_for_unclassifiable_text(detector: LanguageDetector) -> None:
    assert detector.detect_iso639_3("12345 67890") == ""


def test_detect_iso639_3_english(detector: LanguageDetector) -> None:
    text = "The quick brown fox jumps over the lazy dog while the children watch from the window."
    assert detector.detect_iso639_3(text) == "eng"


def test_detect_from_text_rejects_empty_input(detector: LanguageDetector) -> None:
    with pytest.raises(ValueError):
        detector.detect_from_text("   ")


def test_detect_from_text_reports_source(detector: LanguageDetector) -> None:
    result = detector.detect_from_text("Das ist ein ganz normaler deutscher Satz über das Wetter heute.")
    assert result.source == "langdetect"
    assert result.language_code == "deu"
    assert 0.0 < result.confidence <= 1.0


def test_lingua_backend_reports_iso639_3() -> None:
    pytest.importorskip("lingua")
    detector = LanguageDetector(use_lingua=True)
    assert detector.source == "lingua"
    assert detector.detect_iso639_3("Bonjour tout le monde, comment allez-vous aujourd'hui?") == "fra"
    result = detector.detect_from_text("Das ist ein ganz normaler deutscher Satz über das Wetter heute.")
    assert result.language_code == "deu"
    assert 0.0 < result.confidence <= 1.0
