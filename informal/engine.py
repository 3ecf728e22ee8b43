import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Literal

from rich.console import Console

from .errors import InputStreamClosed, ParseFailure, ValidationFailure
from .parsers import resolve_parser

if TYPE_CHECKING:
    from .models import PromptSpec

logger = logging.getLogger(__name__)

State = Literal["await_input", "parsing", "validating", "accepted"]
LineReader = Callable[[], str]

DEFAULT_VALIDATOR_MESSAGE = "Error: does not pass validation"


@dataclass(frozen=True)
class AcquisitionResult:
    value: Any
    attempts: int
    used_default: bool = False


def read_stdin_line() -> str:
    stream = sys.stdin
    if stream is None:
        raise InputStreamClosed("standard input is not available")
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise InputStreamClosed(str(e)) from e
    if not line:
        raise InputStreamClosed()
    return line.rstrip("\r\n")


def default_type_message(failure: ParseFailure) -> str:
    return f"Error: {failure.error}"


class PromptEngine:
    """Drives one prompt until a value is accepted.

    await_input -> parsing -> validating -> accepted, where a parse or
    validation failure prints one message and returns to await_input. There
    is no attempt limit; only a closed input stream ends the loop early.
    """

    def __init__(self, read_line: LineReader | None = None, console: Console | None = None):
        self.read_line = read_line or read_stdin_line
        self.console = console or Console()

    def _write(self, text: str, *, style: str | None = None, end: str = "\n") -> None:
        self.console.print(
            text,
            style=style,
            end=end,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def _read(self) -> str:
        try:
            return self.read_line()
        except InputStreamClosed:
            raise
        except (EOFError, OSError) as e:
            raise InputStreamClosed(str(e) or "end of input stream") from e

    def _validate(self, spec: "PromptSpec", value: Any) -> Any:
        if spec.validator is not None and not spec.validator(value):
            raise ValidationFailure(value)
        return value

    def acquire(self, spec: "PromptSpec") -> AcquisitionResult:
        convert = resolve_parser(spec.target, spec.parser)
        display = spec.display_text()
        attempts = 0

        while True:
            attempts += 1
            state: State = "await_input"
            if display is not None:
                self._write(display, end="")
            try:
                raw = self._read().strip()
            except InputStreamClosed:
                logger.debug("input stream closed after %d attempt(s)", attempts - 1)
                raise

            if not raw and spec.default_value is not None:
                logger.debug("empty input, using default after %d attempt(s)", attempts)
                return AcquisitionResult(value=spec.default_value, attempts=attempts, used_default=True)

            state = "parsing"
            try:
                value = convert(raw)
                state = "validating"
                value = self._validate(spec, value)
            except ParseFailure as e:
                logger.debug("attempt %d: %s failed: %s", attempts, state, e.error)
                self._write(spec.type_message or default_type_message(e), style="red")
                continue
            except ValidationFailure as e:
                logger.debug("attempt %d: %s rejected %r", attempts, state, e.value)
                self._write(spec.validator_message or DEFAULT_VALIDATOR_MESSAGE, style="red")
                continue

            state = "accepted"
            logger.debug("attempt %d: %s", attempts, state)
            return AcquisitionResult(value=value, attempts=attempts)
