"""
Recursive-descent parser building a Value tree from a Cursor.

Parser.parse is the dispatcher: it skips whitespace, looks at one character
and hands off to the production for it. Array and object productions call
back into parse for every nested value, all sharing one cursor.
"""

import re
from typing import Final

from ._config import ParseConfig
from ._cursor import Cursor
from ._errors import ExpectedTokenError
from ._errors import ExtraDataError
from ._errors import InvalidEscapeSequenceError
from ._errors import InvalidHexDigitsError
from ._errors import InvalidKeyError
from ._errors import InvalidLiteralError
from ._errors import InvalidNumberError
from ._errors import InvalidUnicodeEscapeError
from ._errors import NestingTooDeepError
from ._errors import Position
from ._errors import UnexpectedCharacterError
from ._errors import UnexpectedEofError
from ._errors import UnexpectedTokenError
from ._errors import UnterminatedStringError
from ._profile import ProfileContext
from ._values import Array
from ._values import Boolean
from ._values import Null
from ._values import Number
from ._values import Object
from ._values import String
from ._values import Value

_ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
_SURROGATES: Final = range(0xD800, 0xE000)

_NUMBER_START: Final = frozenset("-0123456789")
_NUMBER_CHARS: Final = frozenset("0123456789.-+eE")
_NUMBER_RE: Final = re.compile(
    r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"
)


class Parser:
    """
    Production handlers over a single cursor.

    Each handler consumes exactly the characters of its production and
    returns the finished value, or raises on the first violation.
    """

    def __init__(self, cursor: Cursor, config: ParseConfig):
        self.cursor = cursor
        self.config = config
        self.depth = 0

    @property
    def doc(self) -> str:
        return self.cursor.text

    def _position(self) -> Position:
        return self.cursor.pos

    def _expect(self, expected: str, context: str) -> None:
        """Consumes one character that must equal expected."""
        pos = self.cursor.pos
        char = self.cursor.advance()
        if char is None:
            raise UnexpectedEofError(context, self.doc, pos)
        if char != expected:
            raise ExpectedTokenError(expected, char, self.doc, pos)

    def _descend(self, start: Position) -> None:
        self.depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth > max_depth:
            raise NestingTooDeepError(max_depth, self.doc, start)

    def parse(self) -> Value:
        """Parses the next value, whatever its kind."""
        self.cursor.skip_whitespace()
        pos = self.cursor.pos
        char = self.cursor.peek()

        match char:
            case None:
                raise UnexpectedEofError(
                    "while expecting a value", self.doc, pos
                )
            case "{":
                return self.parse_object()
            case '"':
                return self.parse_string()
            case "[":
                return self.parse_array()
            case "t" | "f":
                return self.parse_bool()
            case "n":
                return self.parse_null()
            case _ if char in _NUMBER_START:
                return self.parse_number()
            case _:
                raise UnexpectedCharacterError(char, self.doc, pos)

    def parse_string(self) -> String:
        with ProfileContext("parse_string", self._position):
            cursor = self.cursor
            start = cursor.pos
            self._expect('"', "while expecting a string")

            chars: list[str] = []
            while True:
                char = cursor.advance()
                if char is None:
                    raise UnterminatedStringError(self.doc, start)
                if char == '"':
                    return String("".join(chars))
                if char == "\\":
                    chars.append(self._parse_escape(cursor.pos - 1))
                else:
                    chars.append(char)

    def _parse_escape(self, backslash: Position) -> str:
        """Decodes the escape whose backslash was just consumed."""
        char = self.cursor.advance()
        if char is None:
            raise UnexpectedEofError(
                "after '\\' in string", self.doc, self.cursor.pos
            )
        if char in _ESCAPES:
            return _ESCAPES[char]
        if char == "u":
            return self._parse_unicode_escape(backslash)
        raise InvalidEscapeSequenceError(char, self.doc, backslash)

    def _parse_unicode_escape(self, backslash: Position) -> str:
        # Each \uXXXX stands alone; surrogate pairs are not combined, so
        # either half on its own is rejected.
        digits = ""
        for _ in range(4):
            char = self.cursor.advance()
            if char is None:
                raise UnexpectedEofError(
                    "inside unicode escape", self.doc, self.cursor.pos
                )
            digits += char
            if char not in _HEX_DIGITS:
                raise InvalidHexDigitsError(digits, self.doc, backslash)

        code_point = int(digits, 16)
        if code_point in _SURROGATES:
            raise InvalidUnicodeEscapeError(code_point, self.doc, backslash)
        return chr(code_point)

    def parse_number(self) -> Number:
        with ProfileContext("parse_number", self._position):
            cursor = self.cursor
            start = cursor.pos
            while True:
                char = cursor.peek()
                if char is None or char not in _NUMBER_CHARS:
                    break
                cursor.advance()

            text = self.doc[start : cursor.pos]
            if not _NUMBER_RE.fullmatch(text):
                raise InvalidNumberError(text, self.doc, start)
            # Out-of-range literals become +/-inf rather than failing
            return Number(float(text))

    def parse_bool(self) -> Boolean:
        with ProfileContext("parse_bool", self._position):
            cursor = self.cursor
            start = cursor.pos
            while True:
                char = cursor.peek()
                if char is None or not char.isalpha():
                    break
                cursor.advance()

            word = self.doc[start : cursor.pos]
            if word == "true":
                return Boolean(True)
            elif word == "false":
                return Boolean(False)
            raise InvalidLiteralError(word, self.doc, start)

    def parse_null(self) -> Null:
        with ProfileContext("parse_null", self._position):
            for expected in "null":
                self._expect(expected, "while parsing null")
            return Null()

    def parse_array(self) -> Array:
        with ProfileContext("parse_array", self._position):
            cursor = self.cursor
            start = cursor.pos
            self._expect("[", "while expecting an array")
            self._descend(start)

            cursor.skip_whitespace()
            if cursor.peek() == "]":
                cursor.advance()
                self.depth -= 1
                return Array()

            items: list[Value] = []
            while True:
                cursor.skip_whitespace()
                items.append(self.parse())

                cursor.skip_whitespace()
                pos = cursor.pos
                char = cursor.advance()
                if char == "]":
                    break
                elif char == ",":
                    continue
                elif char is None:
                    raise UnexpectedEofError("inside array", self.doc, pos)
                raise UnexpectedTokenError(
                    char, self.doc, pos, expecting="',' or ']'"
                )

            self.depth -= 1
            return Array(tuple(items))

    def parse_object(self) -> Object:
        with ProfileContext("parse_object", self._position):
            cursor = self.cursor
            start = cursor.pos
            self._expect("{", "while expecting an object")
            self._descend(start)

            cursor.skip_whitespace()
            if cursor.peek() == "}":
                cursor.advance()
                self.depth -= 1
                return Object()

            entries: dict[str, Value] = {}
            while True:
                cursor.skip_whitespace()
                key = self._parse_object_key()

                cursor.skip_whitespace()
                self._expect(":", "inside object")
                cursor.skip_whitespace()

                # Later duplicates replace earlier ones
                entries[key] = self.parse()

                cursor.skip_whitespace()
                pos = cursor.pos
                char = cursor.advance()
                if char == "}":
                    break
                elif char == ",":
                    continue
                elif char is None:
                    raise UnexpectedEofError("inside object", self.doc, pos)
                raise UnexpectedTokenError(
                    char, self.doc, pos, expecting="',' or '}'"
                )

            self.depth -= 1
            return Object(entries)

    def _parse_object_key(self) -> str:
        """Parses a member name, which must be a string."""
        pos = self.cursor.pos
        char = self.cursor.peek()
        if char is None:
            raise UnexpectedEofError("inside object", self.doc, pos)
        if char != '"':
            raise InvalidKeyError(char, self.doc, pos)
        return self.parse_string().value


def parse_document(text: str, config: ParseConfig) -> Value:
    """
    Parses one complete document.

    Whitespace may surround the value. Anything else after it is rejected
    unless the config allows extra data.
    """
    cursor = Cursor(text)
    parser = Parser(cursor, config)
    value = parser.parse()

    cursor.skip_whitespace()
    if not cursor.at_end() and not config.allow_extra_data:
        raise ExtraDataError(text, cursor.pos)
    return value
