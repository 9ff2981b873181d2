"""Console output helpers."""

from __future__ import annotations

import math
import sys
from datetime import timedelta

from termcolor import colored

ANY_KEY_PROMPT = "Нажмите любую клавишу, чтобы продолжить"


def error(text: str) -> None:
    print(colored(text, "red"))


def info(text: str) -> None:
    print(colored(text, "yellow"))


def message(text: str) -> None:
    print(text)


def fps(delta_time) -> None:
    """Print the frame rate for a frame lasting ``delta_time`` seconds."""
    if isinstance(delta_time, timedelta):
        seconds = delta_time.total_seconds()
    else:
        seconds = float(delta_time)
    rate = 1.0 / seconds if seconds else math.inf
    print(f"FPS: {rate:.1f}")


def format_scroll(text: str) -> str:
    """Frame ``text`` in a three-line box."""
    line = "-" * len(text)
    border = f"|-{line}-|"
    return "\n".join((border, f"| {text} |", border))


def scroll(text: str) -> None:
    for line in format_scroll(text).split("\n"):
        print(colored(line, "yellow"))


def wait_any_key() -> None:
    """Ask the player to continue and wait for a line of input."""
    print(colored(ANY_KEY_PROMPT, "blue"))
    sys.stdin.readline()