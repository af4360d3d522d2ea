from __future__ import annotations

from typing import Final

_CONTROL_CHARS: Final[frozenset[str]] = frozenset(
    chr(code) for code in range(0x00, 0x20) if chr(code) not in {"\t", "\n"}
)


def sanitize_search_text(value: str) -> str:
    """Drop control characters from a search query, keeping everything else."""

    return "".join(ch for ch in value if ch not in _CONTROL_CHARS and ch != "\n")


def sanitize_log_message(value: str) -> str:
    """Normalise log messages by stripping control characters and CR sequences."""

    normalised = value.replace("\r\n", "\n").replace("\r", "\n")
    return "".join(ch for ch in normalised if ch not in _CONTROL_CHARS)


__all__ = ["sanitize_search_text", "sanitize_log_message"]
