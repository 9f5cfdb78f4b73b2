from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def data_dir(base_path: str | Path | None) -> Path:
    """Directory holding the exported transit JSON files.

    Env vars:
      - TRANSIT_DATA_PATH: directory with stops.json, stop_details.json,
        routes.json (default: data)
    """

    value = base_path or os.getenv("TRANSIT_DATA_PATH") or "data"
    return Path(value)


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fp:
        return json.load(fp)


def text(raw: Any) -> str | None:
    if raw is None:
        return None
    value = str(raw).strip()
    return value or None
