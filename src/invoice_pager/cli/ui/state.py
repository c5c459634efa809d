#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme


def isatty(stream, fallback) -> bool:
    if stream is not None:
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return bool(getattr(fallback, "isatty", lambda: False)())


THEME = Theme(
    {
        "title": "bold cyan",
        "accent": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "panel": "cyan",
        "muted": "dim",
    }
)


@dataclass
class UIContext:
    theme: Theme
    console: Console
    console_err: Console


def _build_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=isatty(raw, fallback))


def create_default_context() -> UIContext:
    return UIContext(
        theme=THEME,
        console=_build_console(stderr=False),
        console_err=_build_console(stderr=True),
    )


DEFAULT_CONTEXT = create_default_context()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT


def set_no_color(enabled: bool, *, context: UIContext | None = None) -> None:
    ctx = context or DEFAULT_CONTEXT
    ctx.console.no_color = enabled
    ctx.console_err.no_color = enabled
