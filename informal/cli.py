import logging
import random
from typing import Any, Callable, Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler

from .confirm import DEFAULT_CONFIRM_MESSAGE, confirm_spec, confirm_with_message, parse_yes_no
from .errors import InputStreamClosed, ParseFailure
from .models import PromptSpec, prompt
from .parsers import UnsignedInt, resolve_parser

STREAM_CLOSED_EXIT_CODE = 3

TARGETS: dict[str, Any] = {
    "str": str,
    "int": int,
    "uint": UnsignedInt,
    "float": float,
    "bool": bool,
}
NUMERIC_TARGETS = {"int", "uint", "float"}

app = typer.Typer()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log prompt state transitions to stderr."),
):
    """Informal CLI entrypoint."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True))],
            force=True,
        )
    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit(code=0)


def _stderr() -> Console:
    return Console(stderr=True)


def _resolve_target(type_name: str) -> str:
    normalized = type_name.lower()
    if normalized not in TARGETS:
        _stderr().print(f"[red]Invalid type. Use one of: {', '.join(TARGETS)}.[/red]")
        raise typer.Exit(code=2)
    return normalized


def _resolve_default(spec: PromptSpec, raw: str) -> Any:
    try:
        return resolve_parser(spec.target, spec.parser)(raw.strip())
    except ParseFailure as exc:
        _stderr().print(f"[red]Invalid --default:[/red] {exc.error}")
        raise typer.Exit(code=2)


def _resolve_default_answer(raw: str | None) -> bool | None:
    if raw is None:
        return None
    try:
        return parse_yes_no(raw)
    except ValueError:
        _stderr().print("[red]Invalid --default. Use 'yes' or 'no'.[/red]")
        raise typer.Exit(code=2)


def _bounds_validator(minimum: float | None, maximum: float | None) -> Callable[[Any], bool] | None:
    if minimum is None and maximum is None:
        return None

    def within(value: Any) -> bool:
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True

    return within


def _bounds_message(minimum: float | None, maximum: float | None) -> str:
    if minimum is not None and maximum is not None:
        return f"Error: value must be between {minimum:g} and {maximum:g}"
    if minimum is not None:
        return f"Error: value must be at least {minimum:g}"
    return f"Error: value must be at most {maximum:g}"


def _handle_stream_closed(exc: InputStreamClosed) -> None:
    _stderr().print(f"\n[red]Input stream closed:[/red] {exc.reason}")
    raise typer.Exit(code=STREAM_CLOSED_EXIT_CODE)


def secret_number(rng: random.Random) -> int:
    return rng.randrange(0, 256, 2)


@app.command()
def ask(
    text: str,
    type_name: str = typer.Option("str", "--type", help="Value type: str, int, uint, float or bool."),
    minimum: Optional[float] = typer.Option(None, "--min", help="Smallest accepted value (numeric types)."),
    maximum: Optional[float] = typer.Option(None, "--max", help="Largest accepted value (numeric types)."),
    default: Optional[str] = typer.Option(None, "--default", help="Value used when the answer is empty."),
    type_error_message: Optional[str] = typer.Option(
        None,
        "--type-error-message",
        help="Message shown when the answer cannot be converted.",
    ),
    validator_error_message: Optional[str] = typer.Option(
        None,
        "--validator-error-message",
        help="Message shown when the answer is out of bounds.",
    ),
):
    """Prompt on stderr and print the accepted value on stdout."""
    target_name = _resolve_target(type_name)
    if (minimum is not None or maximum is not None) and target_name not in NUMERIC_TARGETS:
        _stderr().print("[red]--min and --max require a numeric --type.[/red]")
        raise typer.Exit(code=2)

    spec = prompt(text, TARGETS[target_name])
    validator = _bounds_validator(minimum, maximum)
    if validator is not None:
        spec = spec.matches(validator).validator_error_message(_bounds_message(minimum, maximum))
    if validator_error_message:
        spec = spec.validator_error_message(validator_error_message)
    if type_error_message:
        spec = spec.type_error_message(type_error_message)
    if default is not None:
        spec = spec.default(_resolve_default(spec, default))

    try:
        value = spec.get(console=_stderr())
    except InputStreamClosed as exc:
        _handle_stream_closed(exc)

    typer.echo(value)


@app.command("confirm")
def confirm_command(
    text: str,
    message: Optional[str] = typer.Option(None, "--message", help="Message shown on an answer other than yes or no."),
    default: Optional[str] = typer.Option(None, "--default", help="Answer used when the reply is empty: yes or no."),
):
    """Ask a yes/no question. Exits 0 on yes and 1 on no."""
    spec = confirm_spec(text, message or DEFAULT_CONFIRM_MESSAGE, _resolve_default_answer(default))

    try:
        answer = spec.get(console=_stderr())
    except InputStreamClosed as exc:
        _handle_stream_closed(exc)

    raise typer.Exit(code=0 if answer else 1)


@app.command()
def guess(
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the secret number."),
):
    """Guess an even number between 0 and 255."""
    rng = random.Random(seed)
    number = secret_number(rng)
    print("Try guess the number I am thinking of...")
    print("  (hint: it's between 0 and 255 and divisible by two)\n")

    guess_spec = (
        prompt("Enter your guess: ", UnsignedInt)
        .type_error_message("Please enter a valid guess!")
        .matches(lambda x: x % 2 == 0)
        .validator_error_message("Please enter a number divisible by two")
    )

    try:
        while True:
            value = guess_spec.get()
            if value < number:
                print("Too low!")
            elif value > number:
                print("Too high!")
            else:
                print("You got it!")
                print(f"The number was: {number}\n")
                if confirm_with_message("Do you want to play again?", "I asked a simple question..."):
                    number = secret_number(rng)
                else:
                    break
    except InputStreamClosed as exc:
        _handle_stream_closed(exc)


if __name__ == "__main__":
    app()
