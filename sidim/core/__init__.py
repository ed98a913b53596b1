from .dimensions import (
    Dimension, DimensionalError, DimensionMismatch, DimensionError,
    ExponentOverflowError, MAX_EXPONENT, DIMENSIONLESS, LENGTH, MASS, TIME,
    CURRENT, TEMPERATURE, AMOUNT, LUMINOUS_INTENSITY
)
from .quantity import (
    Quantity, Value, DimensionStrippedWarning, DEFAULT_TOLERANCE,
    almost_equal, make_quantity, dimensionless
)

__all__ = [
    'Dimension', 'DimensionalError', 'DimensionMismatch', 'DimensionError',
    'ExponentOverflowError', 'MAX_EXPONENT', 'DIMENSIONLESS', 'LENGTH', 'MASS',
    'TIME', 'CURRENT', 'TEMPERATURE', 'AMOUNT', 'LUMINOUS_INTENSITY',
    'Quantity', 'Value', 'DimensionStrippedWarning', 'DEFAULT_TOLERANCE',
    'almost_equal', 'make_quantity', 'dimensionless'
]
