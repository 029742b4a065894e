"""
Console input handling for a tracker session.
Prompts the driver, parses numeric answers and enforces the distance range.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional

from fueltrack.exceptions import InvalidInputError
from .types import (
    FuelExpenses, WORK_DAYS, MIN_DISTANCE_KM, MAX_DISTANCE_KM, distance_in_range
)

logger = logging.getLogger(__name__)

# Largest magnitude a 96-bit scaled decimal can hold
MAX_DECIMAL_AMOUNT = Decimal("79228162514264337593543950335")

# Digits with "," group separators in the integer part, optional fraction
AMOUNT_PATTERN = re.compile(r"^[+-]?(\d[\d,]*(\.\d*)?|\.\d+)$")
DISTANCE_PATTERN = re.compile(r"^[+-]?(\d[\d,]*(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
DISTANCE_SYMBOLS = ("nan", "infinity", "+infinity", "-infinity")


def parse_decimal(text: Optional[str], field: str = "amount") -> Decimal:
    """
    Parse console text as an exact decimal amount.

    Surrounding whitespace, a leading sign and "," group separators in the
    integer part are accepted. Exponents, underscores, NaN, Infinity and
    amounts beyond MAX_DECIMAL_AMOUNT are rejected.

    Args:
        text: Raw line read from the console
        field: Name of the value being read, used in the error

    Returns:
        Parsed Decimal

    Raises:
        InvalidInputError: If the text is not a decimal amount in range
    """
    stripped = (text or "").strip()
    if not AMOUNT_PATTERN.match(stripped):
        raise InvalidInputError(field, text, "decimal amount")

    try:
        value = Decimal(stripped.replace(",", ""))
    except InvalidOperation:
        raise InvalidInputError(field, text, "decimal amount") from None

    if abs(value) > MAX_DECIMAL_AMOUNT:
        raise InvalidInputError(field, text, "decimal amount")

    return value


def parse_distance(text: Optional[str]) -> float:
    """
    Parse console text as a distance in km.

    Accepts the same "," group separators as parse_decimal, plus an
    exponent and the NaN/Infinity symbols.

    Raises:
        InvalidInputError: If the text is not a real number
    """
    stripped = (text or "").strip()
    if stripped.lower() in DISTANCE_SYMBOLS:
        return float(stripped)

    if not DISTANCE_PATTERN.match(stripped):
        raise InvalidInputError("distance", text, "number")

    return float(stripped.replace(",", ""))


class ConsoleInput:
    """
    Line-based prompt reader.

    Wraps an input function (builtin ``input`` by default) and a print
    function so sessions can be driven from scripted answers.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[..., None]] = None,
    ):
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def read_text(self, prompt: str) -> str:
        """Read one raw line. Empty answers are allowed."""
        return self.input_fn(prompt)

    def read_decimal(self, prompt: str, field: str = "amount") -> Decimal:
        """Read one line and parse it as an exact decimal."""
        raw = self.input_fn(prompt)
        value = parse_decimal(raw, field)
        logger.debug(f"Read {field}: {value}")
        return value

    def read_distance(self) -> float:
        """
        Read the weekly distance, re-prompting until it is in range.

        The bounds are inclusive. There is no retry limit; only a value in
        [MIN_DISTANCE_KM, MAX_DISTANCE_KM] ends the loop. Malformed text is
        not retried.

        Returns:
            Distance in km
        """
        prompt = (
            f"Enter Total Distance Traveled this week "
            f"(km, {MIN_DISTANCE_KM:g}-{MAX_DISTANCE_KM:g}): "
        )

        while True:
            distance = parse_distance(self.input_fn(prompt))

            if distance_in_range(distance):
                logger.debug(f"Read distance: {distance} km")
                return distance

            logger.warning(f"Rejected out-of-range distance: {distance}")
            self.output_fn(
                f"Error: Distance must be between {MIN_DISTANCE_KM:g} and "
                f"{MAX_DISTANCE_KM:g}. Please try again.\n"
            )

    def read_fuel_expenses(self) -> FuelExpenses:
        """
        Read one fuel cost per working day, in day order.

        No range check is applied; zero and negative costs are kept.

        Returns:
            Tuple of exactly WORK_DAYS decimals
        """
        expenses: List[Decimal] = []
        for day in range(1, WORK_DAYS + 1):
            cost = self.read_decimal(f"Enter fuel cost for Day {day}: ", f"fuel cost for Day {day}")
            expenses.append(cost)

        logger.info(f"Captured {len(expenses)} daily fuel costs")
        return tuple(expenses)
