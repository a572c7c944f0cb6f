"""Terminal styling and the warning/success message helpers."""

from __future__ import annotations

import os

_COLORS = {
    "red": "31",
    "green": "32",
    "blue": "34",
}

_RESET = "\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def style(text: object, color: str | None = None, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI escape codes for the given colour and weight."""
    codes = []
    if bold:
        codes.append("1")
    if color is not None:
        try:
            codes.append(_COLORS[color])
        except KeyError:
            raise ValueError(f"unknown color: {color!r}") from None
    if not codes:
        return str(text)
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def warn(message: str) -> None:
    """Print a warning line in red."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{style(symbol, 'red')} {style(message, 'red')}")


def success(message: str) -> None:
    """Print a success line in green."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{style(symbol, 'green')} {style(message, 'green')}")