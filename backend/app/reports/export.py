from __future__ import annotations

import csv
import io
import json
from typing import Any


def flatten_report(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """
    Nested dicts become "_"-joined keys, lists are JSON-encoded, None becomes "".
    """
    out: dict[str, str] = {}
    for key, value in data.items():
        new_key = f"{prefix}_{key}" if prefix else key
        if isinstance(value, dict) and value:
            out.update(flatten_report(value, new_key))
        elif isinstance(value, list):
            out[new_key] = json.dumps(value, default=str)
        elif value is None or value == {}:
            out[new_key] = ""
        elif isinstance(value, bool):
            out[new_key] = "true" if value else "false"
        else:
            out[new_key] = str(value)
    return out


def report_to_csv(data: dict[str, Any]) -> str:
    """Bare header row, then one fully-quoted value row."""
    flat = flatten_report(data)
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="")
    writer.writerow(flat.values())
    return ",".join(flat.keys()) + "\n" + buf.getvalue()
