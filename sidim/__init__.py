"""
sidim - Dimensional analysis over the SI base dimensions
=======================================================

Quantities carry a dimensional formula so that physically inconsistent
arithmetic fails loudly:

- Dimension algebra over length, mass, time, current, temperature, amount
  and luminous intensity
- Dimension-checked quantity arithmetic (add, multiply, powers, roots)
- 3D vectors of quantities (dot, cross, projection, angles)
- Typed kinds (Length, Force, ...) and named units (meter, joule, ...)
- CODATA physical constants as quantities
"""

__version__ = "0.1.0"

# Core functionality
from .core.dimensions import (
    Dimension, DimensionalError, DimensionMismatch, DimensionError,
    ExponentOverflowError, DIMENSIONLESS
)
from .core.quantity import (
    Quantity, Value, DimensionStrippedWarning, make_quantity, dimensionless
)

# Vectors
from .vector.vector3 import Vector3, ZeroVectorError

# Kinds and units
from .units.kinds import Kind, derive, kind_for
from .units.definitions import Unit

from . import constants, units

__all__ = [
    # Core
    'Dimension', 'DimensionalError', 'DimensionMismatch', 'DimensionError',
    'ExponentOverflowError', 'DIMENSIONLESS',
    'Quantity', 'Value', 'DimensionStrippedWarning', 'make_quantity', 'dimensionless',

    # Vectors
    'Vector3', 'ZeroVectorError',

    # Kinds and units
    'Kind', 'derive', 'kind_for', 'Unit', 'units',

    # Constants
    'constants'
]
