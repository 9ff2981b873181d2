"""Reading keys, text and menu choices from the player."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable, Sequence

from blessed import Terminal

from roguest.prints import error

ESCAPE = "KEY_ESCAPE"
ARROW_UP = "KEY_UP"
ARROW_DOWN = "KEY_DOWN"
ENTER = "KEY_ENTER"

_PLAIN_KEYS = {"\x1b": ESCAPE, "\n": ENTER, "\r": ENTER}


def _interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def read_key() -> str:
    """Read one key press.

    Ordinary keys come back as their character; special keys as names such
    as :data:`ESCAPE` or :data:`ARROW_UP`. Raises ``EOFError`` when input ends.
    """
    if _interactive():
        term = Terminal()
        with term.cbreak():
            keystroke = term.inkey()
        if keystroke.is_sequence and keystroke.name:
            return keystroke.name
        return str(keystroke)
    char = sys.stdin.read(1)
    if not char:
        raise EOFError("input closed")
    return _PLAIN_KEYS.get(char, char)


class InputHandler:
    """Reads keys and keeps a short history of them for combos."""

    def __init__(self, max_history: int = 10) -> None:
        self.max_history = max_history
        self._history: deque[str] = deque(maxlen=max_history)

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def record(self, key: str) -> None:
        self._history.append(key)

    def capture(self) -> str | None:
        """Read one key and remember it; ``None`` if no key could be read."""
        try:
            key = read_key()
        except (EOFError, OSError):
            return None
        self.record(key)
        return key

    def check_sequence(self, sequence: Iterable[str]) -> bool:
        """Tell whether the history ends with ``sequence``."""
        wanted = list(sequence)
        if not wanted:
            return True
        if len(wanted) > len(self._history):
            return False
        return list(self._history)[-len(wanted):] == wanted

    def clear_history(self) -> None:
        self._history.clear()


def prompt_text(label: str) -> str:
    """Ask for a line of text until a non-blank one is given."""
    while True:
        print(label)
        line = sys.stdin.readline()
        if not line:
            raise EOFError("input closed")
        trimmed = line.strip()
        if trimmed:
            return trimmed
        error("Ошибка: ввод не может быть пустым. Пожалуйста, введите текст.")


def press_key(
    target_keys: Sequence[str],
    on_resolve: Callable[[], object],
    on_reject: Callable[[], object],
) -> None:
    """Read a key and call ``on_resolve`` if it is a target key, else ``on_reject``."""
    key = read_key()
    if key in target_keys:
        on_resolve()
    else:
        on_reject()


def _select_plain(items: Sequence[str]) -> int:
    for number, item in enumerate(items, 1):
        print(f"{number}) {item}")
    while True:
        line = sys.stdin.readline()
        if not line:
            raise EOFError("input closed")
        choice = line.strip()
        if not choice:
            return 0
        if choice.isdigit() and 1 <= int(choice) <= len(items):
            return int(choice) - 1
        error(f"Введите число от 1 до {len(items)}")


def _select_interactive(items: Sequence[str]) -> int:
    term = Terminal()
    index = 0

    def render() -> None:
        for position, item in enumerate(items):
            line = term.bold_cyan(f"❯ {item}") if position == index else f"  {item}"
            print(term.clear_eol + line)

    with term.cbreak(), term.hidden_cursor():
        render()
        while True:
            keystroke = term.inkey()
            if keystroke.name == "KEY_UP":
                index = (index - 1) % len(items)
            elif keystroke.name == "KEY_DOWN":
                index = (index + 1) % len(items)
            elif keystroke.name == "KEY_ENTER" or str(keystroke) in ("\n", "\r"):
                return index
            else:
                continue
            sys.stdout.write(term.move_up(len(items)))
            render()


def select(items: Sequence[str]) -> int:
    """Let the player pick one of ``items``; returns its index, first by default."""
    if not items:
        raise ValueError("nothing to select from")
    print("")
    if _interactive():
        return _select_interactive(items)
    return _select_plain(items)