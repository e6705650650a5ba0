"""
Artifact I/O for validator reports: sorted JSON, CSV, and a hashes.json over what was written.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Iterable

import pandas as pd


def ensure_dir(path: str | Path) -> None:
    """Create directory and parents if they do not exist."""
    Path(path).mkdir(parents=True, exist_ok=True)


def write_df_csv(df: pd.DataFrame, path: str | Path) -> None:
    """Write DataFrame to CSV with UTF-8 encoding; stable column order, no index."""
    path = Path(path)
    ensure_dir(path.parent)
    df.to_csv(path, index=False, encoding="utf-8")


def _enc(o: Any) -> Any:
    if isinstance(o, dict):
        return {str(k): _enc(v) for k, v in o.items()}
    if isinstance(o, (list, tuple)):
        return [_enc(x) for x in o]
    if hasattr(o, "item") and callable(o.item):
        return o.item()
    if isinstance(o, (float, int, str, bool, type(None))):
        return o
    return str(o)


def write_json_sorted(obj: Any, path: str | Path) -> None:
    """Write JSON with sorted keys so identical reports hash identically."""
    path = Path(path)
    ensure_dir(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_enc(obj), f, indent=2, sort_keys=True)
        f.write("\n")


def compute_file_sha256(path: str | Path) -> str:
    """SHA-256 hex digest of a written artifact; empty string if the file is missing."""
    path = Path(path)
    if not path.is_file():
        return ""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def write_hashes(paths: Iterable[str | Path], out_path: str | Path) -> Dict[str, str]:
    """Write {file name: sha256} for paths to out_path (sorted JSON). Returns the mapping."""
    hashes = {Path(p).name: compute_file_sha256(p) for p in paths}
    write_json_sorted(hashes, out_path)
    return hashes
