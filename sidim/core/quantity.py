"""
Physical quantities: a magnitude in SI base units paired with its Dimension.
"""

from typing import Union
import numbers
import operator
import warnings

import numpy as np

from .dimensions import Dimension, DimensionMismatch, DIMENSIONLESS


# Relative tolerance used by Quantity equality
DEFAULT_TOLERANCE = 1e-14

Scalar = Union[int, float, np.integer, np.floating]


class DimensionStrippedWarning(UserWarning):
    """Issued when a dimensioned quantity is converted to a bare float."""
    pass


def almost_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Compare two floats within ``tolerance``.

    Equal values always match. When either value is exactly zero, or the
    absolute difference is already below ``tolerance``, the comparison is
    absolute; otherwise it is relative, ``|a - b| / (|a| + |b|)``.
    """
    a, b = float(a), float(b)
    if a == b:
        return True
    diff = abs(a - b)
    if a == 0 or b == 0 or diff < tolerance:
        return diff < tolerance
    return diff / (abs(a) + abs(b)) < tolerance


class Quantity:
    """
    A physical quantity: an SI magnitude with a Dimension.

    Quantities are immutable; every operation returns a new one. Addition and
    subtraction require identical dimensions, multiplication and division
    combine them.

    Parameters
    ----------
    magnitude : float
        Value expressed in SI base units for ``dimension``
    dimension : Dimension
        Dimensional formula, dimensionless by default
    """

    __slots__ = ('_magnitude', '_dimension')

    def __init__(self, magnitude: Scalar, dimension: Dimension = DIMENSIONLESS):
        if not isinstance(magnitude, numbers.Real):
            raise TypeError(
                f"Magnitude must be a real number, got {type(magnitude).__name__}"
            )
        if not isinstance(dimension, Dimension):
            raise TypeError(
                f"Dimension must be a Dimension, got {type(dimension).__name__}"
            )
        # numpy scalars keep IEEE-754 results (inf, nan) instead of raising
        self._magnitude = np.float64(magnitude)
        self._dimension = dimension

    @property
    def magnitude(self) -> np.float64:
        """Return the numerical value in SI base units."""
        return self._magnitude

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    def _new(self, magnitude, dimension: Dimension) -> 'Quantity':
        return Quantity(magnitude, dimension)

    def _require_quantity(self, other, action: str):
        if not isinstance(other, Quantity):
            raise TypeError(f"Can only {action} Quantity and Quantity, got {type(other).__name__}")

    def add(self, other: 'Quantity') -> 'Quantity':
        self._require_quantity(other, "add")
        if self._dimension != other._dimension:
            raise DimensionMismatch(
                f"Cannot add quantities with different dimensions: "
                f"{self._dimension} + {other._dimension}"
            )
        return self._new(self._magnitude + other._magnitude, self._dimension)

    def subtract(self, other: 'Quantity') -> 'Quantity':
        self._require_quantity(other, "subtract")
        if self._dimension != other._dimension:
            raise DimensionMismatch(
                f"Cannot subtract quantities with different dimensions: "
                f"{self._dimension} - {other._dimension}"
            )
        return self._new(self._magnitude - other._magnitude, self._dimension)

    def multiply(self, other: 'Quantity') -> 'Quantity':
        self._require_quantity(other, "multiply")
        return self._new(
            self._magnitude * other._magnitude,
            self._dimension.compose(other._dimension)
        )

    def divide(self, other: 'Quantity') -> 'Quantity':
        """Divide by another quantity. A zero divisor gives inf or nan, not an error."""
        self._require_quantity(other, "divide")
        return self._new(
            self._magnitude / other._magnitude,
            self._dimension.decompose(other._dimension)
        )

    def scale(self, scalar: Scalar) -> 'Quantity':
        """Multiply by a dimensionless number."""
        if not isinstance(scalar, numbers.Real):
            raise TypeError(f"Can only scale by a real number, got {type(scalar).__name__}")
        return self._new(self._magnitude * scalar, self._dimension)

    def power(self, n: int) -> 'Quantity':
        """Raise to an integer power; the dimension exponents are multiplied by ``n``."""
        n = operator.index(n)
        dimension = self._dimension.scale(n)
        return self._new(self._magnitude ** n, dimension)

    def sqrt(self) -> 'Quantity':
        """
        Square root of the quantity.

        Raises
        ------
        DimensionError
            If the dimension has an odd exponent. The sign of the magnitude is
            not checked; a negative magnitude gives nan.
        """
        dimension = self._dimension.half()
        return self._new(np.sqrt(self._magnitude), dimension)

    def abs(self) -> 'Quantity':
        return self._new(np.abs(self._magnitude), self._dimension)

    def negate(self) -> 'Quantity':
        return self._new(-self._magnitude, self._dimension)

    def equal(self, other: 'Quantity', tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Same dimension and magnitudes equal within ``tolerance``."""
        self._require_quantity(other, "compare")
        if self._dimension != other._dimension:
            return False
        return almost_equal(self._magnitude, other._magnitude, tolerance)

    def is_dimensionless(self) -> bool:
        return self._dimension.is_dimensionless()

    def check_dimensions(self, expected: Dimension) -> bool:
        """Check if quantity has expected dimensions."""
        return self._dimension == expected

    def to(self, unit) -> float:
        """Return the magnitude expressed in ``unit`` (see :class:`sidim.units.Unit`)."""
        return unit.magnitude_of(self)

    def __add__(self, other: 'Quantity') -> 'Quantity':
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'Quantity') -> 'Quantity':
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Union['Quantity', Scalar]) -> 'Quantity':
        if isinstance(other, Quantity):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> 'Quantity':
        """Right multiplication for scalar * Quantity."""
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Union['Quantity', Scalar]) -> 'Quantity':
        if isinstance(other, Quantity):
            return self.divide(other)
        if isinstance(other, numbers.Real):
            return self._new(self._magnitude / other, self._dimension)
        return NotImplemented

    def __rtruediv__(self, other: Scalar) -> 'Quantity':
        if isinstance(other, numbers.Real):
            return self._new(other / self._magnitude, DIMENSIONLESS.decompose(self._dimension))
        return NotImplemented

    def __pow__(self, n: int) -> 'Quantity':
        return self.power(n)

    def __neg__(self) -> 'Quantity':
        return self.negate()

    def __pos__(self) -> 'Quantity':
        return self

    def __abs__(self) -> 'Quantity':
        return self.abs()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.equal(other)

    # tolerant equality cannot be made consistent with hashing
    __hash__ = None

    def __float__(self) -> float:
        if not self.is_dimensionless():
            warnings.warn(
                f"Stripping dimension {self._dimension} from quantity; "
                f"the magnitude is in SI base units",
                DimensionStrippedWarning,
                stacklevel=2
            )
        return float(self._magnitude)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self._magnitude)!r}, {self._dimension})"

    def __str__(self) -> str:
        return f"{self._magnitude:.6g} {self._dimension}"


# The name used for quantities in the dimensional-analysis literature
Value = Quantity


def make_quantity(magnitude: Scalar, dimension: Dimension) -> Quantity:
    """
    Generic constructor: a quantity from a SI magnitude and a dimension.

    Every named unit and every constant is built through this function.
    """
    return Quantity(magnitude, dimension)


def dimensionless(value: Scalar) -> Quantity:
    """A pure number, e.g. a ratio or an angle in radians."""
    return Quantity(value, DIMENSIONLESS)
