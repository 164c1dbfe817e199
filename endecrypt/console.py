"""Console helpers: the title banner and numeric menu prompts."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_SHIELD = (
    "\\_              _/                                                                             \\_              _/      ",
    "] --__________-- [                                                                             ] --__________-- [",
    "|       ||       | =========================================================================== |       ||       |",
    "\\       ||       / _____   __   __          ______    _____                                    \\       ||       /",
    " [      ||      ] | ____| |  \\ |  |        |   __ \\\\  |  ___|                              _     [      ||      ]",
    " |______||______| | |__   |   \\|  |  ____  |  |  | \\\\ | |__     ___   _ __   _   _  _ __  | |_   |______||______|",
    " |------..------| |  __|  |  |\\   | |____| |  |  | |||  __|   / __| | `__| | | | || `_ \\ |  _|  |------..------|",
    " ]      ||      [ | |___  |  | \\  |        |  |__| //| |___   | |_  | |    | |_| || |_) )| |_   ]      ||      [",
    "  \\     ||     /  |_____| |__|  \\_|        |______// |_____|  \\___| |_|     \\__, || ,__/  \\___|  \\     ||     /",
    "   [    ||    ]                                                             |___/ |_|             [    ||    ]",
    "   \\    ||    /   =============================================================================   \\    ||    /",
    "    [   ||   ]                                                                                     [   ||   ]",
    "     \\__||__/                                                                                       \\__||__/",
    "        --                                                                                             --",
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def print_shield(stdout: TextIO | None = None) -> None:
    """Write the program's title banner."""
    out = stdout if stdout is not None else sys.stdout
    for line in _SHIELD:
        out.write(line + "\n")


def menu_choice(
    low: int, high: int, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> int:
    """Prompt until a whole number between low and high is entered and return it.

    Raises EOFError when input runs out before a valid choice is made.
    """
    inp = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    while True:
        out.write(">> ")
        out.flush()
        line = inp.readline()
        while line and not line.strip():
            line = inp.readline()
        if not line:
            raise EOFError("input ended before a menu choice was made")
        match = _LEADING_INT.match(line)
        if match is not None and low <= int(match.group(1)) <= high:
            return int(match.group(1))
        out.write(f"Ошибка: Пожалуйста, введите число между {low} и {high}.\n")