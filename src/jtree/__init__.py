"""
JSON decoding into an immutable tree of typed values.

parse() turns a JSON document into Null, Boolean, Number, String, Array and
Object nodes, raising a JSONDecodeError subclass that names the failure kind
and its position when the text is malformed.
"""

import logging
from typing import Any

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
from ._errors import JSONDecodeError
from ._errors import NestingTooDeepError
from ._errors import UnexpectedCharacterError
from ._errors import UnexpectedEofError
from ._errors import UnexpectedTokenError
from ._errors import UnterminatedStringError
from ._parser import Parser
from ._parser import parse_document
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._profile import log_hot_path_stats
from ._values import Array
from ._values import Boolean
from ._values import Null
from ._values import Number
from ._values import Object
from ._values import String
from ._values import Value
from ._values import to_python

__version__ = "0.1.0"

log = logging.getLogger(__name__)


def parse(text: str, **kwargs: Any) -> Value:
    """
    Parses a JSON document into a value tree.

    Keyword arguments build the ParseConfig. Any JSON value is accepted at
    the top level; whitespace around it is ignored.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON document must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    try:
        return parse_document(text, config)
    except JSONDecodeError as e:
        log.debug("%s at position %d: %s", type(e).__name__, e.pos, e.msg)
        raise


__all__ = [
    "Array",
    "Boolean",
    "Cursor",
    "ExpectedTokenError",
    "ExtraDataError",
    "HotPathStats",
    "InvalidEscapeSequenceError",
    "InvalidHexDigitsError",
    "InvalidKeyError",
    "InvalidLiteralError",
    "InvalidNumberError",
    "InvalidUnicodeEscapeError",
    "JSONDecodeError",
    "NestingTooDeepError",
    "Null",
    "Number",
    "Object",
    "ParseConfig",
    "Parser",
    "String",
    "UnexpectedCharacterError",
    "UnexpectedEofError",
    "UnexpectedTokenError",
    "UnterminatedStringError",
    "Value",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "log_hot_path_stats",
    "parse",
    "to_python",
]
