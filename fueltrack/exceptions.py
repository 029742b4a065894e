"""
Exceptions raised while reading driver input.
"""

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when console text cannot be parsed as the expected number."""

    def __init__(self, field: str, raw_value: Optional[str], expected: str = "number"):
        self.field = field
        self.raw_value = raw_value
        self.expected = expected
        super().__init__(f"Invalid {field}: {raw_value!r} is not a valid {expected}")
