"""Installed distribution version, or the one declared in pyproject.toml."""
from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


def _source_version() -> str:
    # Source checkout without pip install -e .
    try:
        text = _PYPROJECT.read_text(encoding="utf-8")
    except OSError:
        return "0.0.0"
    match = re.search(r'^version\s*=\s*"([^"]+)"', text, re.MULTILINE)
    return match.group(1) if match else "0.0.0"


try:
    __version__: str = version("lorewiki")
except PackageNotFoundError:
    __version__ = _source_version()
