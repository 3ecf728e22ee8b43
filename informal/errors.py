from typing import Any


class ParseFailure(ValueError):
    def __init__(self, raw_text: str, error: str, kind: str = "type_conversion"):
        super().__init__(f"Input conversion failure ({kind}): {error}")
        self.raw_text = raw_text
        self.error = error
        self.kind = kind


class ValidationFailure(ValueError):
    def __init__(self, value: Any):
        super().__init__(f"Value rejected by validator: {value!r}")
        self.value = value


class InputStreamClosed(EOFError):
    def __init__(self, reason: str = "end of input stream"):
        super().__init__(f"Cannot read input: {reason}")
        self.reason = reason
