"""
Pytest configuration and shared fixtures for jtree tests.

Provides immutable test data fixtures: the json.org JSON_checker documents
with the failure each one must raise, and basic values with their trees.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jtree


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_error: type[jtree.JSONDecodeError] = jtree.JSONDecodeError
    skip_reason: str = ""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides the JSON_checker failure documents with the error each raises.

    Entries with a skip_reason are documents this decoder deliberately
    accepts; test_fail checks that they parse.
    """
    fail_docs: list[tuple[str, type[jtree.JSONDecodeError]]] = [
        # https://json.org/JSON_checker/test/fail1.json
        (
            '"A JSON payload should be an object or array, not a string."',
            jtree.JSONDecodeError,
        ),
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', jtree.UnexpectedEofError),
        # https://json.org/JSON_checker/test/fail3.json
        ('{unquoted_key: "keys must be quoted"}', jtree.ExpectedTokenError),
        # https://json.org/JSON_checker/test/fail4.json
        ('["extra comma",]', jtree.UnexpectedCharacterError),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', jtree.UnexpectedCharacterError),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', jtree.UnexpectedCharacterError),
        # https://json.org/JSON_checker/test/fail7.json
        ('["Comma after the close"],', jtree.ExtraDataError),
        # https://json.org/JSON_checker/test/fail8.json
        ('["Extra close"]]', jtree.ExtraDataError),
        # https://json.org/JSON_checker/test/fail9.json
        ('{"Extra comma": true,}', jtree.ExpectedTokenError),
        # https://json.org/JSON_checker/test/fail10.json
        (
            '{"Extra value after close": true} "misplaced quoted value"',
            jtree.ExtraDataError,
        ),
        # https://json.org/JSON_checker/test/fail11.json
        ('{"Illegal expression": 1 + 2}', jtree.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail12.json
        ('{"Illegal invocation": alert()}', jtree.UnexpectedCharacterError),
        # https://json.org/JSON_checker/test/fail13.json
        ('{"Numbers cannot have leading zeroes": 013}', jtree.InvalidNumberError),
        # https://json.org/JSON_checker/test/fail14.json
        ('{"Numbers cannot be hex": 0x14}', jtree.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail15.json
        (
            '["Illegal backslash escape: \\x15"]',
            jtree.InvalidEscapeSequenceError,
        ),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", jtree.UnexpectedCharacterError),
        # https://json.org/JSON_checker/test/fail17.json
        (
            '["Illegal backslash escape: \\017"]',
            jtree.InvalidEscapeSequenceError,
        ),
        # https://json.org/JSON_checker/test/fail18.json
        ('[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]', jtree.JSONDecodeError),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', jtree.ExpectedTokenError),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', jtree.UnexpectedCharacterError),
        # https://json.org/JSON_checker/test/fail21.json
        ('{"Comma instead of colon", null}', jtree.ExpectedTokenError),
        # https://json.org/JSON_checker/test/fail22.json
        ('["Colon instead of comma": false]', jtree.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', jtree.InvalidLiteralError),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", jtree.UnexpectedCharacterError),
        # https://json.org/JSON_checker/test/fail25.json
        ('["\ttab\tcharacter\tin\tstring\t"]', jtree.JSONDecodeError),
        # https://json.org/JSON_checker/test/fail26.json
        (
            '["tab\\   character\\   in\\  string\\  "]',
            jtree.InvalidEscapeSequenceError,
        ),
        # https://json.org/JSON_checker/test/fail27.json
        ('["line\nbreak"]', jtree.JSONDecodeError),
        # https://json.org/JSON_checker/test/fail28.json
        ('["line\\\nbreak"]', jtree.InvalidEscapeSequenceError),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", jtree.InvalidNumberError),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", jtree.InvalidNumberError),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", jtree.InvalidNumberError),
        # https://json.org/JSON_checker/test/fail32.json
        ('{"Comma instead if closing brace": true,', jtree.UnexpectedEofError),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', jtree.UnexpectedTokenError),
        # https://code.google.com/archive/p/simplejson/issues/3
        ('["A\u001fZ control characters in string"]', jtree.JSONDecodeError),
    ]

    literal_chars = "control characters inside strings are taken literally"
    skips = {
        1: "any JSON value is a valid top-level document",
        18: "nesting is unbounded unless max_depth is set",
        25: literal_chars,
        27: literal_chars,
        34: literal_chars,
    }

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=(idx + 1) not in skips,
            expected_error=error,
            skip_reason=skips.get(idx + 1, ""),
        )
        for idx, (doc, error) in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully per JSON specification.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}",
        "quotes": "&#34; \\u0022 %22 0x22 034 &#x22;",
        "\\/\\\\\\"\\uCAFE\\uBABE\\uAB98\\uFCDE\\ubcda\\uef4A\\b\\f\\n\\r\\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]""",
            should_fail=False,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            should_fail=False,
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
            should_fail=False,
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, jtree.Null()),
        JsonTestCase("true boolean", "true", False, jtree.Boolean(True)),
        JsonTestCase("false boolean", "false", False, jtree.Boolean(False)),
        JsonTestCase("integer", "42", False, jtree.Number(42.0)),
        JsonTestCase("negative integer", "-17", False, jtree.Number(-17.0)),
        JsonTestCase("float", "3.14", False, jtree.Number(3.14)),
        JsonTestCase("empty string", '""', False, jtree.String("")),
        JsonTestCase("simple string", '"hello"', False, jtree.String("hello")),
        JsonTestCase("empty array", "[]", False, jtree.Array()),
        JsonTestCase("empty object", "{}", False, jtree.Object()),
        JsonTestCase(
            "simple array",
            "[1, 2, 3]",
            False,
            jtree.Array(
                (jtree.Number(1.0), jtree.Number(2.0), jtree.Number(3.0))
            ),
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            False,
            jtree.Object({"key": jtree.String("value")}),
        ),
        JsonTestCase("bare minus", "-", True, None, jtree.InvalidNumberError),
        JsonTestCase("empty document", "", True, None, jtree.UnexpectedEofError),
        JsonTestCase(
            "capitalised literal",
            "True",
            True,
            None,
            jtree.UnexpectedCharacterError,
        ),
    ]
