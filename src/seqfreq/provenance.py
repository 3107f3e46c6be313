from __future__ import annotations

import hashlib
import json
import os
import platform
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from . import __version__

MANIFEST_SCHEMA_VERSION = 1


def now_utc_iso() -> str:
    fixed = os.environ.get("SEQFREQ_FIXED_TIMESTAMP_UTC")
    if fixed:
        return fixed
    return datetime.now(tz=timezone.utc).isoformat()


def sha256_file(path: str | Path) -> str:
    path = Path(path)
    h = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()


def system_metadata() -> dict[str, object]:
    return {
        "timestamp_utc": now_utc_iso(),
        "platform": platform.platform(),
        "python_version": platform.python_version(),
    }


def build_manifest(
    command: str, input_path: str | Path, *, argv: list[str] | None = None
) -> dict[str, Any]:
    """Provenance record for one CLI run over one input file."""
    path = Path(input_path)
    return {
        "schema_version": MANIFEST_SCHEMA_VERSION,
        "command": command,
        "command_line": "seqfreq " + " ".join(argv or []),
        "tool_version": __version__,
        "input_path": str(path.resolve()),
        "input_sha256": sha256_file(path),
        "system": system_metadata(),
    }


def write_json_file(path: str | Path, payload: Any) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
        handle.write("\n")
    return p
