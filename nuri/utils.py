# nuri/utils.py
from __future__ import annotations

"""
Shared utilities for nuri.

Formatting helpers for the debug summary and tidy logging. Every log line
goes to stderr: stdout is reserved for the serialized theme.
"""

import sys
from typing import Any, Iterable, Tuple


#  Formatting


def format_seconds_compact(seconds: float) -> str:
    """'<ms>ms' below a second, '<s>s' below a minute, else 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_value(value: Any) -> str:
    """on/off for bools, 1,234 for ints, up to 3 decimals for floats."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def format_percentage(share: float, decimals: int = 1) -> str:
    """Share in 0..1 as a percentage string."""
    return f"{share * 100.0:.{decimals}f}%"


def key_value_pairs_to_string(pairs: Iterable[Tuple[str, Any]], sep: str = "  ") -> str:
    """[('Clusters', 16), ('Debug', True)] -> 'Clusters: 16  Debug: on'."""
    return sep.join(f"{name}: {format_value(value)}" for name, value in pairs)


# Logging


def _to_stderr(line: str) -> None:
    print(line, file=sys.stderr, flush=True)


def log(message: str) -> None:
    _to_stderr(message)


def debug_log(message: str) -> None:
    _to_stderr(f"[debug] {message}")


def warn(message: str) -> None:
    _to_stderr(f"[warn] {message}")


def error(message: str) -> None:
    _to_stderr(f"[error] {message}")


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    One summary line, e.g.
      [run] Image: dunes.jpg  Clusters: 16  Mode: auto  Targets: ghostty
    Goes through debug_log() when debug=True, else log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


__all__ = [
    "format_seconds_compact",
    "format_value",
    "format_percentage",
    "key_value_pairs_to_string",
    "log",
    "debug_log",
    "warn",
    "error",
    "print_config_line",
]
