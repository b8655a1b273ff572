"""Infer the language of a text sample: detector -> ISO normalizer -> matcher."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Protocol

from ..config import get_settings
from .detector import DEFAULT_MIN_LENGTH, LanguageDetector
from .iso import normalize_iso639_3
from .matcher import match_language
from .table import UNKNOWN_LANGUAGE, LanguageEntry

logger = logging.getLogger(__name__)


class Iso639Detector(Protocol):
    def detect_iso639_3(self, text: str, min_length: int = DEFAULT_MIN_LENGTH) -> str:
        ...


@lru_cache(maxsize=1)
def default_detector() -> LanguageDetector:
    """Process-wide detector used when callers do not supply one."""
    return LanguageDetector(use_lingua=get_settings().detector_backend == "lingua")


def infer_language(
    text: str,
    detector: Optional[Iso639Detector] = None,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> LanguageEntry:
    """Return the table entry for the language of ``text``.

    Anything the detector cannot classify, or that has no two letter code,
    yields :data:`UNKNOWN_LANGUAGE` instead of an error.
    """
    detector = detector or default_detector()
    iso639_3 = detector.detect_iso639_3(text, min_length=min_length)
    if not iso639_3:
        return UNKNOWN_LANGUAGE
    iso639_1 = normalize_iso639_3(iso639_3)
    if iso639_1 is None:
        logger.debug("No ISO 639-1 code for detected language %s", iso639_3)
        return UNKNOWN_LANGUAGE
    return match_language(iso639_1)
