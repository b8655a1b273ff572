"""ISO 639-3 to ISO 639-1 normalization with macrolanguage fallback."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Mapping, Optional

_DATA_DIR = Path(__file__).resolve().with_name("data")


def _load_json(filename: str):
    with (_DATA_DIR / filename).open("r", encoding="utf-8") as handle:
        return json.load(handle)


ISO639_3_TO_1: Dict[str, str] = _load_json("iso639_3_to_1.json")
ISO639_3_MACROLANGUAGES: Dict[str, List[Dict[str, object]]] = _load_json(
    "iso639_3_macrolanguages.json"
)


def build_macrolanguage_map(
    groupings: Mapping[str, List[Mapping[str, object]]],
) -> Dict[str, str]:
    """Flatten ``{macro: [{narrow: metadata}, ...]}`` into ``{narrow: macro}``.

    Iteration follows the grouping table's own order, so a narrow code listed
    under several macrolanguages resolves to the last one.
    """
    macro_map: Dict[str, str] = {}
    for macro_code, members in groupings.items():
        for record in members:
            for narrow_code in record:
                macro_map[narrow_code] = macro_code
    return macro_map


MACROLANGUAGE_MAP: Dict[str, str] = build_macrolanguage_map(ISO639_3_MACROLANGUAGES)


def normalize_iso639_3(
    code: str,
    alpha_table: Optional[Mapping[str, str]] = None,
    macro_map: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Return the two letter code for ``code`` or ``None`` when there is none.

    Detectors often report an individual language (``cmn``) that has no
    two letter code of its own; those resolve through their macrolanguage
    (``zho`` -> ``zh``).
    """
    alpha_table = ISO639_3_TO_1 if alpha_table is None else alpha_table
    macro_map = MACROLANGUAGE_MAP if macro_map is None else macro_map
    direct = alpha_table.get(code)
    if direct:
        return direct
    macro_code = macro_map.get(code)
    if macro_code is None:
        return None
    return alpha_table.get(macro_code) or None
