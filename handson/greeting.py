"""Time-of-day greetings written to any text stream."""

from __future__ import annotations

import contextvars
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TextIO


class Lang(Enum):
    """Languages a greeting can be written in."""

    JAPANESE = "ja"
    ENGLISH = "en"


_MESSAGES: dict[Lang, tuple[str, str, str]] = {
    Lang.JAPANESE: ("おはよう", "こんにちは", "こんばんは"),
    Lang.ENGLISH: ("Good morning", "Hello", "Good evening"),
}

_current_lang: contextvars.ContextVar[Lang] = contextvars.ContextVar(
    "greeting_lang", default=Lang.JAPANESE
)


@contextmanager
def use_lang(lang: Lang) -> Iterator[Lang]:
    """Use ``lang`` as the default language inside the ``with`` block."""
    token = _current_lang.set(lang)
    try:
        yield lang
    finally:
        _current_lang.reset(token)


def message_for_hour(hour: int, lang: Lang | None = None) -> str:
    """Return the greeting for ``hour``.

    04:00-09:59 is morning, 10:00-16:59 is daytime, anything else is evening.
    """
    morning, hello, evening = _MESSAGES[lang or _current_lang.get()]
    if 4 <= hour <= 9:
        return morning
    if 10 <= hour <= 16:
        return hello
    return evening


@dataclass
class Greeting:
    """Writes a greeting chosen by the time a clock reports."""

    clock: Callable[[], datetime] | None = None

    def now(self) -> datetime:
        """Current time from the clock, or the system time without one."""
        if self.clock is None:
            return datetime.now()
        return self.clock()

    def do(self, writer: TextIO) -> None:
        """Write the greeting for the current hour to ``writer``."""
        writer.write(message_for_hour(self.now().hour))


def main(argv: list[str] | None = None) -> int:
    """Print the greeting for the current time."""
    Greeting().do(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())