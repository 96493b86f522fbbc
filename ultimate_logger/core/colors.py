# ultimate_logger/core/colors.py
"""
Console color rendering.

The Logger only picks a color name per level; turning that name into escape
sequences is colorama's job. When color is disabled (ULTIMATE_LOGGER_COLOR=never,
or "auto" with a non-TTY stream) text passes through unchanged.
"""

from __future__ import annotations

from typing import IO, Optional

import colorama
from colorama import Fore, Style

from ultimate_logger.core.config import settings

# Enables ANSI handling on legacy Windows consoles; no-op elsewhere.
colorama.just_fix_windows_console()

PALETTE = {
    "dim": Style.DIM,
    "cyan": Fore.CYAN,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "red": Fore.RED,
    "bright_red": Fore.LIGHTRED_EX + Style.BRIGHT,
}

RESET = Style.RESET_ALL


def render(text: str, color: str) -> str:
    """Wrap `text` in the escape codes for `color`, followed by a reset."""
    code = PALETTE.get(color)
    if not code:
        return text
    return f"{code}{text}{RESET}"


def color_enabled(stream: Optional[IO[str]], mode: Optional[str] = None) -> bool:
    """
    Decide whether output written to `stream` should be colored.

    "always" and "never" are absolute; "auto" colors only interactive terminals.
    """
    mode = mode or settings.COLOR
    if mode == "always":
        return True
    if mode == "never" or stream is None:
        return False

    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # closed or detached stream
        return False
