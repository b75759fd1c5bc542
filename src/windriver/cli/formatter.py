"""Output formatting for CLI, in text (human) and JSON (script) modes."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict


def _safe_print(text: str, file=None) -> None:
    """Print text, replacing characters the console encoding cannot show."""
    file = file or sys.stdout
    try:
        print(text, file=file)
    except UnicodeEncodeError:
        encoding = getattr(file, "encoding", "utf-8") or "utf-8"
        print(text.encode(encoding, errors="replace").decode(encoding), file=file)


def output(data: Any, as_json: bool = False) -> None:
    """Print data to stdout in the requested format."""
    if as_json:
        if isinstance(data, (dict, list)):
            _safe_print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            _safe_print(json.dumps({"result": data}, ensure_ascii=False))
    else:
        if isinstance(data, dict):
            for k, v in data.items():
                _safe_print(f"{k}: {v}")
        elif isinstance(data, list):
            for item in data:
                _safe_print(str(item))
        else:
            _safe_print(str(data))


def output_error(message: str, as_json: bool = False) -> None:
    """Print an error message to stderr."""
    if as_json:
        _safe_print(json.dumps({"error": message}, ensure_ascii=False), file=sys.stderr)
    else:
        _safe_print(f"Error: {message}", file=sys.stderr)


def format_package_info(info: Dict[str, Any]) -> str:
    """Format package identity fields as aligned ``key: value`` lines."""
    width = max((len(k) for k in info), default=0)
    return "\n".join(f"{k.ljust(width)} : {v}" for k, v in info.items())
