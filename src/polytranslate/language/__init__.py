"""Language code resolution, normalization and detection."""

from .detector import LanguageDetectionResult, LanguageDetector, to_iso639_3
from .inference import default_detector, infer_language
from .iso import MACROLANGUAGE_MAP, build_macrolanguage_map, normalize_iso639_3
from .matcher import base_code, match_language
from .table import LANGUAGE_INDEX, LANGUAGE_TABLE, UNKNOWN_LANGUAGE, LanguageEntry, build_language_index

__all__ = [
    "LANGUAGE_INDEX",
    "LANGUAGE_TABLE",
    "MACROLANGUAGE_MAP",
    "UNKNOWN_LANGUAGE",
    "LanguageDetectionResult",
    "LanguageDetector",
    "LanguageEntry",
    "base_code",
    "build_language_index",
    "build_macrolanguage_map",
    "default_detector",
    "infer_language",
    "match_language",
    "normalize_iso639_3",
    "to_iso639_3",
]
