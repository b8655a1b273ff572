"""Resolve locale-like identifiers to entries of the language table."""

from __future__ import annotations

import re

from .table import LANGUAGE_INDEX, LANGUAGE_TABLE, UNKNOWN_LANGUAGE, LanguageEntry

_SEPARATORS = re.compile(r"[-_]")


def base_code(raw_code: str) -> str:
    """Return the lowercased part of ``raw_code`` before the first ``-`` or ``_``."""
    return _SEPARATORS.split(raw_code, maxsplit=1)[0].lower()


def match_language(raw_code: str) -> LanguageEntry:
    position = LANGUAGE_INDEX.get(base_code(raw_code or ""))
    if position is None:
        return UNKNOWN_LANGUAGE
    return LANGUAGE_TABLE[position]
