"""Language detection helpers relying on langdetect/lingua."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import langcodes
from langdetect import DetectorFactory, LangDetectException, detect_langs

try:  # pragma: no cover - optional dependency
    from lingua import LanguageDetectorBuilder
except Exception:  # pragma: no cover - lingua may be unavailable
    LanguageDetectorBuilder = None  # type: ignore

DetectorFactory.seed = 0

DEFAULT_MIN_LENGTH = 3

logger = logging.getLogger(__name__)


def to_iso639_3(raw_code: Optional[str]) -> str:
    """Convert a tag such as ``fr`` or ``zh-cn`` to its ISO 639-3 code, ``""`` if unknown."""
    if not raw_code or not raw_code.strip():
        return ""
    try:
        return langcodes.Language.get(raw_code.strip()).to_alpha3()
    except (LookupError, ValueError):
        logger.debug("No ISO 639-3 code for detector tag %r", raw_code)
        return ""


@dataclass(slots=True)
class LanguageDetectionResult:
    """Represents the outcome of a language detection attempt."""

    language_code: Optional[str]
    confidence: float
    source: str

    def to_dict(self) -> dict[str, object]:
        return {
            "language_code": self.language_code,
            "confidence": self.confidence,
            "source": self.source,
        }


class LanguageDetector:
    """Detect ISO 639-3 languages using lingua when available, otherwise langdetect."""

    def __init__(self, use_lingua: bool = True) -> None:
        self._lingua_detector = None
        if use_lingua and LanguageDetectorBuilder is not None:
            self._lingua_detector = LanguageDetectorBuilder.from_all_languages().build()
        logger.info("Language detector ready (backend=%s)", self.source)

    @property
    def source(self) -> str:
        return "lingua" if self._lingua_detector is not None else "langdetect"

    def detect_from_text(self, text: str) -> LanguageDetectionResult:
        cleaned = (text or "").strip()
        if not cleaned:
            raise ValueError("Text input for language detection must be non-empty")
        if self._lingua_detector is not None:
            language = self._lingua_detector.detect_language_of(cleaned)
            if language is None:
                return LanguageDetectionResult(language_code=None, confidence=0.0, source="lingua")
            confidence = self._lingua_detector.compute_language_confidence(cleaned, language)
            language_code = language.iso_code_639_3.name.lower()
            return LanguageDetectionResult(language_code=language_code, confidence=confidence, source="lingua")
        try:
            candidates = detect_langs(cleaned)
        except LangDetectException as exc:
            raise ValueError("Unable to detect language") from exc
        best = candidates[0]
        language_code = to_iso639_3(best.lang) or None
        return LanguageDetectionResult(language_code=language_code, confidence=best.prob, source="langdetect")

    def detect_iso639_3(self, text: str, min_length: int = DEFAULT_MIN_LENGTH) -> str:
        """Return the ISO 639-3 code of ``text`` or ``""`` when undetermined."""
        cleaned = (text or "").strip()
        if len(cleaned) < min_length:
            return ""
        try:
            result = self.detect_from_text(cleaned)
        except ValueError:
            logger.debug("Detector could not classify %d characters", len(cleaned))
            return ""
        return result.language_code or ""
