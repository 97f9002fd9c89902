"""Markdown preprocessing: text transforms applied before conversion."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

# Registry of preprocessing functions
_PREPROCESS_REGISTRY: dict[str, Callable[..., str]] = {}


def _register(name: str) -> Callable:
    """Decorator to register a markdown preprocessing function."""
    def decorator(fn: Callable[..., str]) -> Callable[..., str]:
        _PREPROCESS_REGISTRY[name] = fn
        return fn
    return decorator


def get_preprocess_fn(name: str) -> Callable[..., str] | None:
    """Look up a preprocessing function by name."""
    return _PREPROCESS_REGISTRY.get(name)


def list_preprocess_steps() -> list[str]:
    return sorted(_PREPROCESS_REGISTRY)


# ── Individual transforms ──


@_register("normalize_list_notation")
def normalize_list_notation(text: str) -> str:
    """Rewrite "1)" style list markers into the "1." form.

    The part of a line before its first ")" must be a bare number once
    trimmed. Everything up to and including the parenthesis is replaced by
    the number and a period; the rest of the line is kept as is.
    """
    lines = text.split("\n")
    return "\n".join(_convert_marker(line) for line in lines)


def _convert_marker(line: str) -> str:
    pos = line.find(")")
    if pos == -1:
        return line

    trimmed = line[:pos].strip()
    if trimmed.isascii() and trimmed.isdigit():
        return f"{trimmed}.{line[pos + 1:]}"

    return line


# ── Orchestrator ──


def run_preprocessing(text: str, steps: list[str]) -> str:
    """Run a sequence of preprocessing steps on markdown text.

    Each step is identified by its registered name.
    """
    current = text
    for step_name in steps:
        fn = _PREPROCESS_REGISTRY.get(step_name)
        if fn is None:
            logger.warning("Unknown preprocessing step '%s', skipping", step_name)
            continue
        current = fn(current)
    return current
