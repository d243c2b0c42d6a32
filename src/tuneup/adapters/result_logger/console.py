"""Terminal result logger.

Renders one styled line per result event with emoji glyphs, falling back to
ASCII markers when the stream cannot encode them. Lines go to stderr by
default so stdout stays free for whatever the test script prints.
"""

from typing import IO

import click

from tuneup.interfaces.result_logger import ResultLogger

# (emoji, ASCII fallback, colour)
START = ("▶️", "[>]", "cyan")  # pragma: no mutate
PASS = ("✅", "[OK]", "green")  # pragma: no mutate
FAIL = ("❌", "[X]", "red")  # pragma: no mutate
ERROR = ("⚠️", "[!]", "yellow")  # pragma: no mutate


def _supports_character(character: str, stream: IO[str]) -> bool:
    """Return True if *character* can be encoded on *stream*.

    Decides whether to emit emojis or fall back to ASCII so terminals without
    UTF-8 don't raise `UnicodeEncodeError`.
    """
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


class ConsoleResultLogger(ResultLogger):
    """Print test results as styled terminal lines.

    Args:
        stream: Text stream to write to. Defaults to Click's stderr stream,
            looked up on every write.
        color: Force colour on or off; ``None`` lets Click decide based on
            whether the stream is a terminal.
    """

    def __init__(self, stream: IO[str] | None = None, color: bool | None = None) -> None:
        self._stream = stream
        self._color = color

    def _current_stream(self) -> IO[str]:
        return self._stream or click.get_text_stream("stderr")

    def _emit(self, marker: tuple[str, str, str], text: str, bold: bool = True) -> None:
        emoji, fallback, colour = marker
        stream = self._current_stream()
        glyph = emoji if _supports_character(emoji, stream) else fallback
        click.secho(
            f"{glyph}  {text}", fg=colour, bold=bold, file=stream, color=self._color
        )

    def log_start(self, title: str) -> None:
        self._emit(START, f"Start: {title}", bold=False)

    def log_pass(self, title: str) -> None:
        self._emit(PASS, f"Pass: {title}")

    def log_fail(self, title: str) -> None:
        self._emit(FAIL, f"Fail: {title}")

    def log_error(self, message: str) -> None:
        self._emit(ERROR, message, bold=False)
