from typing import Any, Callable

from pydantic import NonNegativeInt, TypeAdapter, ValidationError

from .errors import ParseFailure

UnsignedInt = NonNegativeInt

Parser = Callable[[str], Any]


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0].get("msg", exc))


def _adapter_parser(target: Any) -> Parser:
    adapter = TypeAdapter(target)

    def parse(text: str) -> Any:
        try:
            return adapter.validate_python(text)
        except ValidationError as e:
            raise ParseFailure(raw_text=text, error=_first_error_message(e)) from e

    return parse


def _callable_parser(parser: Parser) -> Parser:
    def parse(text: str) -> Any:
        try:
            return parser(text)
        except ParseFailure:
            raise
        except ValidationError as e:
            raise ParseFailure(raw_text=text, error=_first_error_message(e)) from e
        except (TypeError, ValueError) as e:
            raise ParseFailure(raw_text=text, error=str(e)) from e

    return parse


def resolve_parser(target: Any = str, parser: Parser | None = None) -> Parser:
    """Return a converter from text to ``target``.

    An explicit ``parser`` wins over ``target``. Either way the returned
    callable raises ``ParseFailure`` when the text cannot be converted.
    """
    if parser is not None:
        return _callable_parser(parser)
    if target is str:
        return str
    return _adapter_parser(target)
