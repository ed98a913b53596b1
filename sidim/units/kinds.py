"""
Typed quantity kinds and the derivation layer.

A kind is a :class:`Quantity` bound to one dimension (``Length``, ``Force``,
...). Kinds add no state. Arithmetic on a kind returns the kind registered
for the result's dimension, so ``Force(10) / Area(2)`` is a ``Pressure``
without any per-pair method.
"""

from types import MappingProxyType
from typing import Optional, Type

from ..core.dimensions import (
    Dimension, DimensionMismatch, DIMENSIONLESS, LENGTH, MASS, TIME, CURRENT,
    TEMPERATURE, AMOUNT, LUMINOUS_INTENSITY
)
from ..core.quantity import Quantity, Scalar


class Kind(Quantity):
    """
    Base class for quantities of one fixed dimension.

    Subclasses set ``DIMENSION`` and are constructed from a magnitude in SI
    base units, e.g. ``Length(5.0)`` is five meters.
    """

    __slots__ = ()
    DIMENSION: Dimension = DIMENSIONLESS

    def __init__(self, magnitude: Scalar):
        super().__init__(magnitude, self.DIMENSION)

    @classmethod
    def from_quantity(cls, quantity: Quantity) -> 'Kind':
        """
        Wrap a generic quantity.

        Raises
        ------
        DimensionMismatch
            If ``quantity`` does not have this kind's dimension.
        """
        if not isinstance(quantity, Quantity):
            raise TypeError(f"Expected a Quantity, got {type(quantity).__name__}")
        if quantity.dimension != cls.DIMENSION:
            raise DimensionMismatch(
                f"Cannot make {cls.__name__} {cls.DIMENSION} from quantity "
                f"with dimension {quantity.dimension}"
            )
        return cls(quantity.magnitude)

    def _new(self, magnitude, dimension: Dimension) -> Quantity:
        if dimension == self.DIMENSION:
            return type(self)(magnitude)
        return derive(Quantity(magnitude, dimension))


class Dimensionless(Kind):
    """Pure number [1]."""
    __slots__ = ()
    DIMENSION = DIMENSIONLESS


# Base kinds

class Length(Kind):
    """Length [L]."""
    __slots__ = ()
    DIMENSION = LENGTH


class Mass(Kind):
    """Mass [M]."""
    __slots__ = ()
    DIMENSION = MASS


class Time(Kind):
    """Time [T]."""
    __slots__ = ()
    DIMENSION = TIME


class Current(Kind):
    """Electric current [I]."""
    __slots__ = ()
    DIMENSION = CURRENT


class Temperature(Kind):
    """Thermodynamic temperature [Θ]."""
    __slots__ = ()
    DIMENSION = TEMPERATURE


class Amount(Kind):
    """Amount of substance [N]."""
    __slots__ = ()
    DIMENSION = AMOUNT


class LuminousIntensity(Kind):
    """Luminous intensity [J]."""
    __slots__ = ()
    DIMENSION = LUMINOUS_INTENSITY


# Geometric and mechanical kinds

class Area(Kind):
    __slots__ = ()
    DIMENSION = Dimension(length=2)


class Volume(Kind):
    __slots__ = ()
    DIMENSION = Dimension(length=3)


class Velocity(Kind):
    __slots__ = ()
    DIMENSION = Dimension(length=1, time=-1)


class Acceleration(Kind):
    __slots__ = ()
    DIMENSION = Dimension(length=1, time=-2)


class Force(Kind):
    """Force [L M T^-2], newton."""
    __slots__ = ()
    DIMENSION = Dimension(length=1, mass=1, time=-2)


class Energy(Kind):
    """Energy [L^2 M T^-2], joule."""
    __slots__ = ()
    DIMENSION = Dimension(length=2, mass=1, time=-2)


class Power(Kind):
    """Power [L^2 M T^-3], watt."""
    __slots__ = ()
    DIMENSION = Dimension(length=2, mass=1, time=-3)


class Pressure(Kind):
    """Pressure [L^-1 M T^-2], pascal."""
    __slots__ = ()
    DIMENSION = Dimension(length=-1, mass=1, time=-2)


class Frequency(Kind):
    """Frequency [T^-1], hertz."""
    __slots__ = ()
    DIMENSION = Dimension(time=-1)


class Momentum(Kind):
    __slots__ = ()
    DIMENSION = Dimension(length=1, mass=1, time=-1)


class Density(Kind):
    __slots__ = ()
    DIMENSION = Dimension(length=-3, mass=1)


# Electromagnetic kinds

class Charge(Kind):
    """Electric charge [T I], coulomb."""
    __slots__ = ()
    DIMENSION = Dimension(time=1, current=1)


class Voltage(Kind):
    """Electric potential [L^2 M T^-3 I^-1], volt."""
    __slots__ = ()
    DIMENSION = Dimension(length=2, mass=1, time=-3, current=-1)


class Resistance(Kind):
    """Electric resistance [L^2 M T^-3 I^-2], ohm."""
    __slots__ = ()
    DIMENSION = Dimension(length=2, mass=1, time=-3, current=-2)


class Capacitance(Kind):
    """Capacitance [L^-2 M^-1 T^4 I^2], farad."""
    __slots__ = ()
    DIMENSION = Dimension(length=-2, mass=-1, time=4, current=2)


class Inductance(Kind):
    """Inductance [L^2 M T^-2 I^-2], henry."""
    __slots__ = ()
    DIMENSION = Dimension(length=2, mass=1, time=-2, current=-2)


class MagneticField(Kind):
    """Magnetic flux density [M T^-2 I^-1], tesla."""
    __slots__ = ()
    DIMENSION = Dimension(mass=1, time=-2, current=-1)


class MagneticFlux(Kind):
    """Magnetic flux [L^2 M T^-2 I^-1], weber."""
    __slots__ = ()
    DIMENSION = Dimension(length=2, mass=1, time=-2, current=-1)


# Kinds sharing a dimension with an earlier one. They can be constructed
# directly but derivation never produces them.

class AngularVelocity(Kind):
    """Angular velocity [T^-1], radian per second."""
    __slots__ = ()
    DIMENSION = Dimension(time=-1)


class Torque(Kind):
    """Torque [L^2 M T^-2], newton meter."""
    __slots__ = ()
    DIMENSION = Dimension(length=2, mass=1, time=-2)


# Order matters: the first kind listed for a dimension is the derived one
KINDS = (
    Dimensionless, Length, Mass, Time, Current, Temperature, Amount,
    LuminousIntensity, Area, Volume, Velocity, Acceleration, Force, Energy,
    Power, Pressure, Frequency, Momentum, Density, Charge, Voltage,
    Resistance, Capacitance, Inductance, MagneticField, MagneticFlux,
    AngularVelocity, Torque,
)


def _build_table():
    table = {}
    for kind in KINDS:
        table.setdefault(kind.DIMENSION, kind)
    return MappingProxyType(table)


KIND_BY_DIMENSION = _build_table()


def kind_for(dimension: Dimension) -> Optional[Type[Kind]]:
    """Return the kind derived for ``dimension``, or None if there is none."""
    return KIND_BY_DIMENSION.get(dimension)


def derive(quantity: Quantity) -> Quantity:
    """
    Rewrap a quantity as the kind registered for its dimension.

    Quantities whose dimension has no kind are returned unchanged, as are
    quantities that already are an instance of their derived kind.
    """
    kind = kind_for(quantity.dimension)
    if kind is None or type(quantity) is kind:
        return quantity
    return kind(quantity.magnitude)
