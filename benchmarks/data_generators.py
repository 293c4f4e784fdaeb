"""
Test data generators for JSON parsing benchmarks.

Creates JSON documents that stress different parser productions:
- small and wide objects (object handler, key strings)
- mixed arrays (dispatcher)
- deep nesting (recursion through arrays and objects)
- escape-heavy strings (string handler)
- signed and exponent numbers (number handler)
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    if data_type not in _GENERATORS:
        raise ValueError(f"Unknown data type: {data_type}")

    return _GENERATORS[data_type]()


def _generate_small_object() -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "manager": None,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _random_scalar() -> Any:
    return random.choice(
        [
            random.randint(-1000, 1000),
            round(random.uniform(-100.0, 100.0), 3),
            _random_string(random.randint(5, 30)),
            random.choice([True, False]),
            None,
        ]
    )


def _generate_mixed_array() -> str:
    """Generates a large array with mixed data types."""
    array: list[Any] = []
    for i in range(200):
        if i % 6 == 0:
            array.append(
                {
                    "index": i,
                    "value": _random_string(10),
                    "score": round(random.uniform(0, 100), 2),
                }
            )
        else:
            array.append(_random_scalar())
    return json.dumps(array)


def _generate_nested_structure() -> str:
    """Generates deeply nested JSON structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(7))


def _escaped_string() -> str:
    chars = []
    for _ in range(50):
        if random.random() < _ESCAPE_PROBABILITY:
            chars.append(random.choice(_ESCAPES))
        else:
            chars.append(
                random.choice(string.ascii_letters + string.digits + " ")
            )
    return "".join(chars)


def _generate_string_heavy() -> str:
    """Generates JSON with many string escape sequences."""
    # Escapes are written straight into the document text, so the object
    # is assembled by hand rather than through json.dumps.
    strings = ",".join(f'"{_escaped_string()}"' for _ in range(100))
    unicode = ",".join(
        f'"\\u{random.randint(0x00A0, 0xD7FF):04x}"' for _ in range(50)
    )
    return f'{{"strings": [{strings}], "unicode": [{unicode}]}}'


def _generate_number_heavy() -> str:
    """Generates numbers with signs, fractions and exponents."""
    numbers = [
        random.choice(
            [
                str(random.randint(-(10**9), 10**9)),
                f"{random.uniform(-1e6, 1e6):.6f}",
                f"{random.uniform(1, 10):.3f}e{random.randint(-30, 30)}",
                f"-{random.uniform(1, 10):.2f}E+{random.randint(0, 20)}",
            ]
        )
        for _ in range(500)
    ]
    return "[" + ", ".join(numbers) + "]"


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))


_GENERATORS: dict[str, Callable[[], str]] = {
    "small_object": _generate_small_object,
    "mixed_array": _generate_mixed_array,
    "nested_structure": _generate_nested_structure,
    "string_heavy": _generate_string_heavy,
    "number_heavy": _generate_number_heavy,
}

DATA_TYPES = list(_GENERATORS)
