"""
Three-component vectors of physical quantities.

Every component is a :class:`~sidim.core.quantity.Quantity` and all three
share one dimension, so vector algebra inherits the dimensional checks of the
scalar algebra.
"""

from typing import Callable, Iterator, Tuple, Union
from dataclasses import dataclass
import numbers

import numpy as np

from ..core.dimensions import Dimension, DimensionMismatch, DIMENSIONLESS
from ..core.quantity import Quantity, Scalar, DEFAULT_TOLERANCE


# Default tolerance for the parallel / perpendicular tests
VECTOR_TOLERANCE = 1e-10


class ZeroVectorError(ValueError):
    """Raised when an operation needs a direction and gets a zero-length vector."""
    pass


@dataclass(frozen=True, eq=False)
class Vector3:
    """
    A 3D vector with physical units.

    Parameters
    ----------
    x, y, z : Quantity
        Components; all three must have the same dimension

    Raises
    ------
    DimensionMismatch
        If the components do not share one dimension
    """
    x: Quantity
    y: Quantity
    z: Quantity

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            component = getattr(self, name)
            if not isinstance(component, Quantity):
                raise TypeError(
                    f"Vector component {name} must be a Quantity, "
                    f"got {type(component).__name__}"
                )
        if not self.x.dimension == self.y.dimension == self.z.dimension:
            raise DimensionMismatch(
                f"Vector components must have the same dimension: "
                f"x={self.x.dimension}, y={self.y.dimension}, z={self.z.dimension}"
            )

    @classmethod
    def of(cls, constructor: Callable[[Scalar], Quantity], x: Scalar, y: Scalar, z: Scalar) -> 'Vector3':
        """
        Build a vector from plain numbers with a unit or kind constructor.

        Example: ``Vector3.of(meter, 1, 2, 3)`` or ``Vector3.of(Velocity, 0, 0, 9.8)``.
        """
        return cls(constructor(x), constructor(y), constructor(z))

    @classmethod
    def from_array(cls, values, dimension: Dimension = DIMENSIONLESS) -> 'Vector3':
        """Build a vector from three SI magnitudes."""
        values = np.asarray(values, dtype=float)
        if values.shape != (3,):
            raise ValueError(f"Expected 3 components, got array of shape {values.shape}")
        return cls(*(Quantity(v, dimension) for v in values))

    @classmethod
    def zero(cls, dimension: Dimension = DIMENSIONLESS) -> 'Vector3':
        return cls.from_array([0.0, 0.0, 0.0], dimension)

    @classmethod
    def unit_x(cls, dimension: Dimension = DIMENSIONLESS) -> 'Vector3':
        return cls.from_array([1.0, 0.0, 0.0], dimension)

    @classmethod
    def unit_y(cls, dimension: Dimension = DIMENSIONLESS) -> 'Vector3':
        return cls.from_array([0.0, 1.0, 0.0], dimension)

    @classmethod
    def unit_z(cls, dimension: Dimension = DIMENSIONLESS) -> 'Vector3':
        return cls.from_array([0.0, 0.0, 1.0], dimension)

    @property
    def dimension(self) -> Dimension:
        """Dimension shared by the three components."""
        return self.x.dimension

    def components(self) -> Tuple[Quantity, Quantity, Quantity]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Component magnitudes in SI base units."""
        return np.array([self.x.magnitude, self.y.magnitude, self.z.magnitude])

    def _require_vector(self, other, action: str):
        if not isinstance(other, Vector3):
            raise TypeError(f"Can only {action} Vector3 and Vector3, got {type(other).__name__}")

    def add(self, other: 'Vector3') -> 'Vector3':
        self._require_vector(other, "add")
        x = self.x.add(other.x)
        y = self.y.add(other.y)
        z = self.z.add(other.z)
        return Vector3(x, y, z)

    def subtract(self, other: 'Vector3') -> 'Vector3':
        self._require_vector(other, "subtract")
        x = self.x.subtract(other.x)
        y = self.y.subtract(other.y)
        z = self.z.subtract(other.z)
        return Vector3(x, y, z)

    def scale(self, scalar: Scalar) -> 'Vector3':
        return Vector3(self.x.scale(scalar), self.y.scale(scalar), self.z.scale(scalar))

    def negate(self) -> 'Vector3':
        return Vector3(self.x.negate(), self.y.negate(), self.z.negate())

    def multiply(self, quantity: Quantity) -> 'Vector3':
        """Multiply each component by a quantity; dimensions are composed."""
        return Vector3(
            self.x.multiply(quantity),
            self.y.multiply(quantity),
            self.z.multiply(quantity)
        )

    def divide(self, quantity: Quantity) -> 'Vector3':
        """Divide each component by a quantity; dimensions are decomposed."""
        return Vector3(
            self.x.divide(quantity),
            self.y.divide(quantity),
            self.z.divide(quantity)
        )

    def dot(self, other: 'Vector3') -> Quantity:
        """
        Dot product. The result has dimension ``self.dimension * other.dimension``,
        e.g. force . displacement is an energy.
        """
        self._require_vector(other, "dot")
        xx = self.x.multiply(other.x)
        yy = self.y.multiply(other.y)
        zz = self.z.multiply(other.z)
        # the three products share one dimension
        return xx.add(yy).add(zz)

    def cross(self, other: 'Vector3') -> 'Vector3':
        """
        Cross product::

            v x w = (v_y*w_z - v_z*w_y, v_z*w_x - v_x*w_z, v_x*w_y - v_y*w_x)

        The result has dimension ``self.dimension * other.dimension``,
        e.g. position x force is a torque.
        """
        self._require_vector(other, "cross")
        x = self.y.multiply(other.z).subtract(self.z.multiply(other.y))
        y = self.z.multiply(other.x).subtract(self.x.multiply(other.z))
        z = self.x.multiply(other.y).subtract(self.y.multiply(other.x))
        return Vector3(x, y, z)

    def magnitude_squared(self) -> Quantity:
        return self.dot(self)

    def magnitude(self) -> Quantity:
        """
        Length of the vector, ``sqrt(v . v)``.

        Raises
        ------
        DimensionError
            If the squared dimension cannot be halved.
        """
        return self.magnitude_squared().sqrt()

    def normalize(self) -> 'Vector3':
        """
        Dimensionless unit vector in the same direction.

        Raises
        ------
        ZeroVectorError
            If the vector has zero length.
        """
        mag = self.magnitude()
        if mag.magnitude == 0:
            raise ZeroVectorError("Cannot normalize zero vector")
        return self.divide(mag)

    def project_onto(self, onto: 'Vector3') -> 'Vector3':
        """
        Component of this vector along ``onto``: ``(v . w / |w|^2) * w``.

        Raises
        ------
        ZeroVectorError
            If ``onto`` has zero length.
        """
        self._require_vector(onto, "project")
        onto_squared = onto.magnitude_squared()
        if onto_squared.magnitude == 0:
            raise ZeroVectorError("Cannot project onto zero vector")
        factor = self.dot(onto).divide(onto_squared)
        return onto.multiply(factor)

    def angle_between(self, other: 'Vector3') -> float:
        """
        Angle between two vectors in radians.

        Raises
        ------
        ZeroVectorError
            If either vector has zero length.
        """
        self._require_vector(other, "compare")
        dot_product = self.dot(other)
        mag_product = self.magnitude().multiply(other.magnitude())
        if mag_product.magnitude == 0:
            raise ZeroVectorError("Cannot compute angle with zero vector")
        cos_theta = dot_product.divide(mag_product).magnitude
        # round-off can push the cosine just outside [-1, 1]
        return float(np.arccos(np.clip(cos_theta, -1.0, 1.0)))

    def is_zero(self) -> bool:
        return self.x.magnitude == 0 and self.y.magnitude == 0 and self.z.magnitude == 0

    def is_parallel(self, other: 'Vector3', tolerance: float = VECTOR_TOLERANCE) -> bool:
        """Parallel or antiparallel: the cross product vanishes."""
        cross_squared = self.cross(other).magnitude_squared()
        return abs(cross_squared.magnitude) < tolerance

    def is_perpendicular(self, other: 'Vector3', tolerance: float = VECTOR_TOLERANCE) -> bool:
        """Perpendicular: the dot product vanishes."""
        return abs(self.dot(other).magnitude) < tolerance

    def equal(self, other: 'Vector3', tolerance: float = DEFAULT_TOLERANCE) -> bool:
        self._require_vector(other, "compare")
        return all(a.equal(b, tolerance) for a, b in zip(self, other))

    def __iter__(self) -> Iterator[Quantity]:
        return iter(self.components())

    def __add__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Union[Quantity, Scalar]) -> 'Vector3':
        if isinstance(other, Quantity):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Quantity, Scalar]) -> 'Vector3':
        if isinstance(other, Quantity):
            return self.divide(other)
        if isinstance(other, numbers.Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> 'Vector3':
        return self.negate()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equal(other)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"
