from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from rich.console import Console

from .engine import AcquisitionResult, LineReader, PromptEngine

T = TypeVar("T")
U = TypeVar("U")


class PromptSpec(BaseModel, Generic[T]):
    """A pending prompt: what to show, what to convert into, what to accept.

    Every builder method returns an updated copy, so a spec stays unchanged
    while an acquisition is running. Validators must be pure: the engine may
    call them more than once for the same value and expects the same answer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    prompt_text: Optional[str] = None
    prompt_prefix: Optional[str] = None
    prompt_suffix: Optional[str] = None
    target: Any = str
    parser: Optional[Callable[[str], Any]] = None
    validator: Optional[Callable[[Any], bool]] = None
    default_value: Optional[Any] = None
    type_message: Optional[str] = None
    validator_message: Optional[str] = None

    def matches(self, predicate: Callable[[T], bool]) -> "PromptSpec[T]":
        return self.model_copy(update={"validator": predicate})

    def type_error_message(self, text: str) -> "PromptSpec[T]":
        return self.model_copy(update={"type_message": text})

    def validator_error_message(self, text: str) -> "PromptSpec[T]":
        return self.model_copy(update={"validator_message": text})

    def prefix(self, text: str) -> "PromptSpec[T]":
        return self.model_copy(update={"prompt_prefix": text})

    def suffix(self, text: str) -> "PromptSpec[T]":
        return self.model_copy(update={"prompt_suffix": text})

    def default(self, value: T) -> "PromptSpec[T]":
        """Return ``value`` when the user enters an empty line."""
        return self.model_copy(update={"default_value": value})

    def parse_with(self, parser: Callable[[str], T]) -> "PromptSpec[T]":
        return self.model_copy(update={"parser": parser})

    def display_text(self) -> str | None:
        if self.prompt_text is None:
            return None
        return f"{self.prompt_prefix or ''}{self.prompt_text}{self.prompt_suffix or ''}"

    def acquire(
        self,
        *,
        read_line: LineReader | None = None,
        console: Console | None = None,
    ) -> AcquisitionResult:
        return PromptEngine(read_line=read_line, console=console).acquire(self)

    def get(
        self,
        *,
        read_line: LineReader | None = None,
        console: Console | None = None,
    ) -> T:
        """Prompt until a value parses and validates, then return it.

        Raises ``InputStreamClosed`` if the input runs out first.
        """
        return self.acquire(read_line=read_line, console=console).value

    def map(
        self,
        fn: Callable[[T], U],
        *,
        read_line: LineReader | None = None,
        console: Console | None = None,
    ) -> U:
        return fn(self.get(read_line=read_line, console=console))


def prompt(
    text: str | None = None,
    target: Any = str,
    *,
    parser: Callable[[str], Any] | None = None,
) -> PromptSpec:
    return PromptSpec(prompt_text=text, target=target, parser=parser)
