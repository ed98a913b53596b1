"""
Dimensional formulas over the seven SI base dimensions.
"""

from typing import Tuple
from dataclasses import dataclass, fields
import operator


# Largest absolute exponent a Dimension may carry
MAX_EXPONENT = 32

# Render symbols, in field order
_SYMBOLS = ('L', 'M', 'T', 'I', 'Θ', 'N', 'J')


class DimensionalError(Exception):
    """Raised when dimensional analysis fails."""
    pass


class DimensionMismatch(DimensionalError):
    """Raised when an operation needs identical dimensions and gets different ones."""
    pass


class DimensionError(DimensionalError):
    """Raised when a dimension cannot be halved because an exponent is odd."""
    pass


class ExponentOverflowError(DimensionalError):
    """Raised when an exponent leaves the range [-MAX_EXPONENT, MAX_EXPONENT]."""
    pass


@dataclass(frozen=True)
class Dimension:
    """
    Dimensional formula of a physical quantity.

    Each field is the integer exponent of one SI base dimension:

        velocity = length^1 * time^-1  ->  Dimension(length=1, time=-1)
        energy   = L^2 M^1 T^-2        ->  Dimension(length=2, mass=1, time=-2)

    All exponents zero means dimensionless.
    """
    length: int = 0
    mass: int = 0
    time: int = 0
    current: int = 0
    temperature: int = 0
    amount: int = 0
    luminous_intensity: int = 0

    def __post_init__(self):
        for f in fields(self):
            exponent = operator.index(getattr(self, f.name))
            if not -MAX_EXPONENT <= exponent <= MAX_EXPONENT:
                raise ExponentOverflowError(
                    f"Exponent {exponent} for {f.name} is outside "
                    f"[-{MAX_EXPONENT}, {MAX_EXPONENT}]"
                )
            # bools and numpy integers are stored as plain ints
            object.__setattr__(self, f.name, int(exponent))

    @classmethod
    def from_tuple(cls, exponents) -> 'Dimension':
        """Build a Dimension from seven exponents in L, M, T, I, Θ, N, J order."""
        exponents = tuple(exponents)
        if len(exponents) != len(_SYMBOLS):
            raise ValueError(
                f"Dimension needs {len(_SYMBOLS)} exponents, got {len(exponents)}"
            )
        return cls(*exponents)

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def compose(self, other: 'Dimension') -> 'Dimension':
        """Dimension of a product: exponents are added."""
        return Dimension.from_tuple(a + b for a, b in zip(self.as_tuple(), other.as_tuple()))

    def decompose(self, other: 'Dimension') -> 'Dimension':
        """Dimension of a quotient: exponents are subtracted."""
        return Dimension.from_tuple(a - b for a, b in zip(self.as_tuple(), other.as_tuple()))

    def scale(self, n: int) -> 'Dimension':
        """Dimension of an integer power: exponents are multiplied by ``n``."""
        n = operator.index(n)
        return Dimension.from_tuple(a * n for a in self.as_tuple())

    def is_even(self) -> bool:
        return all(a % 2 == 0 for a in self.as_tuple())

    def half(self) -> 'Dimension':
        """
        Dimension of a square root: exponents are halved.

        Raises
        ------
        DimensionError
            If any exponent is odd.
        """
        if not self.is_even():
            raise DimensionError(
                f"Cannot halve dimension with odd exponent: {self}"
            )
        return Dimension.from_tuple(a // 2 for a in self.as_tuple())

    def is_dimensionless(self) -> bool:
        return self == DIMENSIONLESS

    def __mul__(self, other: 'Dimension') -> 'Dimension':
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.compose(other)

    def __truediv__(self, other: 'Dimension') -> 'Dimension':
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.decompose(other)

    def __pow__(self, power: int) -> 'Dimension':
        return self.scale(power)

    def __str__(self) -> str:
        parts = [
            f"{symbol}^{exponent}"
            for symbol, exponent in zip(_SYMBOLS, self.as_tuple())
            if exponent != 0
        ]
        if not parts:
            return "[1]"
        return "[" + " ".join(parts) + "]"


DIMENSIONLESS = Dimension()

# Base dimensions
LENGTH = Dimension(length=1)
MASS = Dimension(mass=1)
TIME = Dimension(time=1)
CURRENT = Dimension(current=1)
TEMPERATURE = Dimension(temperature=1)
AMOUNT = Dimension(amount=1)
LUMINOUS_INTENSITY = Dimension(luminous_intensity=1)
