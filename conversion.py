import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

DECIMAL_DIGITS = frozenset('0123456789')
BINARY_DIGITS = frozenset('01')
MAX_INPUT_LENGTH = 64
MAX_VALUE = 2 ** 64 - 1


class Base(str, Enum):
    DECIMAL = 'decimal'
    BINARY = 'binary'

    @property
    def label(self):
        return self.value.capitalize()

    @property
    def other(self):
        return Base.BINARY if self is Base.DECIMAL else Base.DECIMAL


ERROR_MESSAGES = {
    Base.DECIMAL: "Only positive integers allowed",
    Base.BINARY: "Only 0s and 1s allowed",
}


class InvalidInput(ValueError):
    def __init__(self, text, base, message=None):
        self.text = text
        self.base = Base(base)
        super().__init__(message or error_message(self.base))


@dataclass(frozen=True)
class ConversionStep:
    index: int
    operation: str
    partial: str

    def as_dict(self):
        return {"step": self.index, "calculation": self.operation, "result": self.partial}


@dataclass(frozen=True)
class ConversionResult:
    value: str
    steps: tuple
    source: str = ''
    base: Base = Base.DECIMAL

    def as_dict(self):
        return {
            "input": self.source,
            "base": self.base.value,
            "result": self.value,
            "steps": [step.as_dict() for step in self.steps],
        }


def error_message(base) -> str:
    return ERROR_MESSAGES[Base(base)]


def validate(text: str, base) -> bool:
    """Return True when every character of ``text`` is a digit of ``base``.

    The empty string counts as valid ("nothing typed yet"), so callers must
    check for non-empty input before converting.
    """
    allowed = DECIMAL_DIGITS if Base(base) is Base.DECIMAL else BINARY_DIGITS
    return all(char in allowed for char in text)


def to_binary(n: int) -> ConversionResult:
    """Convert ``n`` to binary by repeated division by 2, recording each division."""
    if n < 0:
        raise ValueError("Negative numbers are not supported.")
    if n == 0:
        return ConversionResult('0', (ConversionStep(1, '0 ÷ 2 = 0', 'Remainder: 0'),), '0', Base.DECIMAL)
    source = str(n)
    steps = []
    remainders = []
    while n > 0:
        quotient, remainder = divmod(n, 2)
        remainders.append(str(remainder))
        steps.append(ConversionStep(len(steps) + 1, f"{n} ÷ 2 = {quotient}", f"Remainder: {remainder}"))
        n = quotient
    # Remainders come out least significant bit first.
    binary = ''.join(reversed(remainders))
    logger.debug(f"{source} -> {binary} in {len(steps)} steps")
    return ConversionResult(binary, tuple(steps), source, Base.DECIMAL)


def to_decimal(bits: str) -> ConversionResult:
    """Convert a string of 0s and 1s to decimal, accumulating one bit per step.

    ``bits`` must already have passed ``validate(bits, Base.BINARY)``.
    """
    steps = []
    total = 0
    length = len(bits)
    for i, char in enumerate(bits):
        bit = int(char)
        power = length - 1 - i
        value = bit * 2 ** power
        total += value
        steps.append(ConversionStep(i + 1, f"{bit} × 2^{power} = {value}", f"Running total: {total}"))
    logger.debug(f"{bits} -> {total} in {len(steps)} steps")
    return ConversionResult(str(total), tuple(steps), bits, Base.BINARY)


def convert(text: str, base) -> ConversionResult:
    base = Base(base)
    if not text:
        raise InvalidInput(text, base, "Input cannot be empty.")
    if not validate(text, base):
        raise InvalidInput(text, base)
    # Length first so int() never sees more digits than the interpreter allows.
    if len(text) > MAX_INPUT_LENGTH:
        raise InvalidInput(text, base, f"Input is too long (max {MAX_INPUT_LENGTH} characters).")
    if base is Base.DECIMAL and int(text) > MAX_VALUE:
        raise InvalidInput(text, base, f"Number is too large (max {MAX_VALUE}).")
    if base is Base.DECIMAL:
        return to_binary(int(text))
    return to_decimal(text)
