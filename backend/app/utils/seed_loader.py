"""Helpers to read the JSON seed file used to pre-populate stores.

The file maps a resource kind to a list of record objects:

    {"books": [{"title": "...", "author": "...", "year": 1980}], ...}

Records may pin an `id`; otherwise the store assigns one.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional


def load_seed_file(path: Path, known_kinds: Optional[Iterable[str]] = None) -> Dict[str, List[dict]]:
    """Parse `path` and return `{kind: [record dict, ...]}`.

    Raises ValueError when the file is not valid JSON, is not an object of
    lists of objects, or names a kind outside `known_kinds` (when given).
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"seed file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("seed file must contain a JSON object")
    allowed = set(known_kinds) if known_kinds is not None else None
    out = {}
    for kind, records in data.items():
        if allowed is not None and kind not in allowed:
            raise ValueError(f"unknown resource kind in seed file: {kind}")
        if not isinstance(records, list):
            raise ValueError(f"seed entry for {kind} must be a list")
        for idx, item in enumerate(records):
            if not isinstance(item, dict):
                raise ValueError(f"seed item {kind}[{idx}] must be an object")
        out[kind] = records
    return out
