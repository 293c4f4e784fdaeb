"""
Parse failures raised by the jtree decoder.

Every failure is a JSONDecodeError carrying the document, the offending
position and the derived line/column. Subclasses name the failure kind and
keep the offending text so callers can react without parsing messages.
"""

type Position = int


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing position, line/column numbers, and surrounding
    context to help users identify and fix JSON syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


def _describe(char: str | None) -> str:
    return "end of input" if char is None else repr(char)


class UnexpectedEofError(JSONDecodeError):
    """Input ended while a production was still open."""

    def __init__(self, context: str, doc: str, pos: Position) -> None:
        self.context = context
        super().__init__(f"Unexpected end of input {context}", doc, pos)


class UnexpectedTokenError(JSONDecodeError):
    """A character outside the set allowed at this point was found."""

    def __init__(
        self, found: str, doc: str, pos: Position, *, expecting: str = ""
    ) -> None:
        self.found = found
        self.expecting = expecting
        msg = f"Unexpected character {found!r}"
        if expecting:
            msg = f"Expecting {expecting}, found {found!r}"
        super().__init__(msg, doc, pos)


class UnexpectedCharacterError(UnexpectedTokenError):
    """No value can start with the character found."""

    def __init__(self, found: str, doc: str, pos: Position) -> None:
        super().__init__(found, doc, pos, expecting="value")


class ExpectedTokenError(JSONDecodeError):
    """A specific character was required but something else was found."""

    def __init__(
        self, expected: str, found: str | None, doc: str, pos: Position
    ) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expecting {expected!r}, found {_describe(found)}", doc, pos
        )


class InvalidEscapeSequenceError(JSONDecodeError):
    def __init__(self, found: str, doc: str, pos: Position) -> None:
        self.found = found
        super().__init__(f"Invalid escape sequence: \\{found}", doc, pos)


class InvalidHexDigitsError(JSONDecodeError):
    def __init__(self, digits: str, doc: str, pos: Position) -> None:
        self.digits = digits
        super().__init__(f"Invalid hex digits in \\u{digits}", doc, pos)


class InvalidUnicodeEscapeError(JSONDecodeError):
    """The escaped code point is not a Unicode scalar value."""

    def __init__(self, code_point: int, doc: str, pos: Position) -> None:
        self.code_point = code_point
        super().__init__(
            f"Invalid unicode escape: \\u{code_point:04x} is a surrogate",
            doc,
            pos,
        )


class UnterminatedStringError(JSONDecodeError):
    def __init__(self, doc: str, pos: Position) -> None:
        super().__init__("Unterminated string starting at", doc, pos)


class InvalidNumberError(JSONDecodeError):
    def __init__(self, text: str, doc: str, pos: Position) -> None:
        self.text = text
        super().__init__(f"Invalid number {text!r}", doc, pos)


class InvalidLiteralError(JSONDecodeError):
    def __init__(self, text: str, doc: str, pos: Position) -> None:
        self.text = text
        super().__init__(
            f"Invalid literal: expected 'true' or 'false', found {text!r}",
            doc,
            pos,
        )


class InvalidKeyError(ExpectedTokenError):
    """Object member names must be strings, so a '"' was required."""

    def __init__(self, found: str, doc: str, pos: Position) -> None:
        JSONDecodeError.__init__(
            self,
            "Expecting property name enclosed in double quotes, "
            f"found {found!r}",
            doc,
            pos,
        )
        self.expected = '"'
        self.found = found


class ExtraDataError(JSONDecodeError):
    def __init__(self, doc: str, pos: Position) -> None:
        super().__init__("Extra data", doc, pos)


class NestingTooDeepError(JSONDecodeError):
    def __init__(self, max_depth: int, doc: str, pos: Position) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Nesting deeper than {max_depth} levels", doc, pos
        )
