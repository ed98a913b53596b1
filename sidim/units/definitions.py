"""
Named units.

A :class:`Unit` is both a constructor (``meter(5)`` is a ``Length`` of five
meters) and a conversion accessor (``kilometer.magnitude_of(d)`` or
``d.to(kilometer)``). Every unit goes through the generic constructor and the
magnitude accessor of :mod:`sidim.core.quantity`; magnitudes are always
stored in SI base units.

Conversion factors come from :mod:`scipy.constants` where it defines them.
"""

from typing import Union
import math
import numbers

from scipy import constants as sc

from ..core.dimensions import Dimension, DimensionalError, DimensionMismatch
from ..core.quantity import Quantity, Scalar, make_quantity
from . import kinds


class Unit:
    """
    A physical unit: the scale (and offset) taking its values to SI.

    ``si = value * scale + offset``. Only temperature scales use an offset.
    """

    def __init__(self, name: str, symbol: str, dimension: Dimension,
                 scale: float = 1.0, offset: float = 0.0):
        if not isinstance(dimension, Dimension):
            raise TypeError(f"Dimension must be a Dimension, got {type(dimension).__name__}")
        self.name = name
        self.symbol = symbol
        self.dimension = dimension
        self.scale = scale
        self.offset = offset

    def scaled(self, name: str, symbol: str, factor: float) -> 'Unit':
        """A unit of the same dimension, ``factor`` times this one."""
        return Unit(name, symbol, self.dimension, self.scale * factor, self.offset)

    def __call__(self, value: Scalar) -> Quantity:
        """Build a quantity of ``value`` in this unit."""
        if not isinstance(value, numbers.Real):
            raise TypeError(f"Unit value must be a real number, got {type(value).__name__}")
        return kinds.derive(make_quantity(value * self.scale + self.offset, self.dimension))

    def magnitude_of(self, quantity: Quantity) -> float:
        """
        Read a quantity's magnitude in this unit.

        Raises
        ------
        DimensionMismatch
            If the quantity's dimension differs from the unit's.
        """
        if not isinstance(quantity, Quantity):
            raise TypeError(f"Expected a Quantity, got {type(quantity).__name__}")
        if quantity.dimension != self.dimension:
            raise DimensionMismatch(
                f"Cannot express quantity with dimension {quantity.dimension} "
                f"in {self.name} {self.dimension}"
            )
        return float((quantity.magnitude - self.offset) / self.scale)

    def _check_composable(self, other: 'Unit'):
        for unit in (self, other):
            if unit.offset != 0:
                raise DimensionalError(
                    f"Cannot compose {unit.name}: units with an offset "
                    f"only convert absolute values"
                )

    def __mul__(self, other: Union['Unit', float]) -> 'Unit':
        if isinstance(other, numbers.Real):
            self._check_composable(self)
            return Unit(self.name, self.symbol, self.dimension, self.scale * other)
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_composable(other)
        return Unit(
            f"{self.name}*{other.name}",
            f"{self.symbol}*{other.symbol}",
            self.dimension * other.dimension,
            self.scale * other.scale
        )

    def __truediv__(self, other: Union['Unit', float]) -> 'Unit':
        if isinstance(other, numbers.Real):
            self._check_composable(self)
            return Unit(self.name, self.symbol, self.dimension, self.scale / other)
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_composable(other)
        return Unit(
            f"{self.name}/{other.name}",
            f"{self.symbol}/{other.symbol}",
            self.dimension / other.dimension,
            self.scale / other.scale
        )

    def __pow__(self, power: int) -> 'Unit':
        self._check_composable(self)
        return Unit(
            f"{self.name}^{power}",
            f"{self.symbol}^{power}",
            self.dimension ** power,
            self.scale ** power
        )

    def __repr__(self) -> str:
        return f"Unit({self.symbol})"


# -----------------------------------------------------------------------------
# Length
# -----------------------------------------------------------------------------

meter = Unit("meter", "m", kinds.Length.DIMENSION)
millimeter = meter.scaled("millimeter", "mm", sc.milli)
centimeter = meter.scaled("centimeter", "cm", sc.centi)
kilometer = meter.scaled("kilometer", "km", sc.kilo)
micrometer = meter.scaled("micrometer", "um", sc.micro)
nanometer = meter.scaled("nanometer", "nm", sc.nano)
angstrom = meter.scaled("angstrom", "Å", sc.angstrom)
inch = meter.scaled("inch", "in", sc.inch)
foot = meter.scaled("foot", "ft", sc.foot)
mile = meter.scaled("mile", "mi", sc.mile)
astronomical_unit = meter.scaled("astronomical unit", "au", sc.astronomical_unit)
light_year = meter.scaled("light-year", "ly", sc.light_year)
parsec = meter.scaled("parsec", "pc", sc.parsec)

# -----------------------------------------------------------------------------
# Mass
# -----------------------------------------------------------------------------

kilogram = Unit("kilogram", "kg", kinds.Mass.DIMENSION)
gram = kilogram.scaled("gram", "g", sc.gram)
milligram = kilogram.scaled("milligram", "mg", sc.milli * sc.gram)
microgram = kilogram.scaled("microgram", "ug", sc.micro * sc.gram)
tonne = kilogram.scaled("tonne", "t", sc.metric_ton)
pound = kilogram.scaled("pound", "lb", sc.pound)
ounce = kilogram.scaled("ounce", "oz", sc.ounce)
atomic_mass_unit = kilogram.scaled("atomic mass unit", "u", sc.atomic_mass)
solar_mass = kilogram.scaled("solar mass", "M_sun", 1.98892e30)
earth_mass = kilogram.scaled("earth mass", "M_earth", 5.9722e24)

# -----------------------------------------------------------------------------
# Time
# -----------------------------------------------------------------------------

second = Unit("second", "s", kinds.Time.DIMENSION)
millisecond = second.scaled("millisecond", "ms", sc.milli)
microsecond = second.scaled("microsecond", "us", sc.micro)
nanosecond = second.scaled("nanosecond", "ns", sc.nano)
minute = second.scaled("minute", "min", sc.minute)
hour = second.scaled("hour", "h", sc.hour)
day = second.scaled("day", "d", sc.day)
week = second.scaled("week", "wk", sc.week)
year = second.scaled("year", "yr", sc.Julian_year)

# -----------------------------------------------------------------------------
# Electric current, temperature, amount, luminous intensity
# -----------------------------------------------------------------------------

ampere = Unit("ampere", "A", kinds.Current.DIMENSION)
milliampere = ampere.scaled("milliampere", "mA", sc.milli)
microampere = ampere.scaled("microampere", "uA", sc.micro)
kiloampere = ampere.scaled("kiloampere", "kA", sc.kilo)

kelvin = Unit("kelvin", "K", kinds.Temperature.DIMENSION)
celsius = Unit("degree Celsius", "°C", kinds.Temperature.DIMENSION,
               offset=sc.zero_Celsius)
fahrenheit = Unit("degree Fahrenheit", "°F", kinds.Temperature.DIMENSION,
                  scale=sc.degree_Fahrenheit,
                  offset=sc.zero_Celsius - 32 * sc.degree_Fahrenheit)

mole = Unit("mole", "mol", kinds.Amount.DIMENSION)
millimole = mole.scaled("millimole", "mmol", sc.milli)
micromole = mole.scaled("micromole", "umol", sc.micro)
kilomole = mole.scaled("kilomole", "kmol", sc.kilo)

candela = Unit("candela", "cd", kinds.LuminousIntensity.DIMENSION)
millicandela = candela.scaled("millicandela", "mcd", sc.milli)
kilocandela = candela.scaled("kilocandela", "kcd", sc.kilo)

# -----------------------------------------------------------------------------
# Geometric and kinematic
# -----------------------------------------------------------------------------

square_meter = Unit("square meter", "m^2", kinds.Area.DIMENSION)
square_centimeter = square_meter.scaled("square centimeter", "cm^2", sc.centi ** 2)
square_kilometer = square_meter.scaled("square kilometer", "km^2", sc.kilo ** 2)
hectare = square_meter.scaled("hectare", "ha", sc.hectare)

cubic_meter = Unit("cubic meter", "m^3", kinds.Volume.DIMENSION)
liter = cubic_meter.scaled("liter", "L", sc.liter)
milliliter = cubic_meter.scaled("milliliter", "mL", sc.milli * sc.liter)
cubic_centimeter = cubic_meter.scaled("cubic centimeter", "cm^3", sc.centi ** 3)

meter_per_second = Unit("meter per second", "m/s", kinds.Velocity.DIMENSION)
kilometer_per_hour = meter_per_second.scaled("kilometer per hour", "km/h", sc.kmh)
mile_per_hour = meter_per_second.scaled("mile per hour", "mph", sc.mph)
speed_of_light = meter_per_second.scaled("speed of light", "c", sc.c)

meter_per_second_squared = Unit("meter per second squared", "m/s^2",
                                kinds.Acceleration.DIMENSION)
standard_gravity = meter_per_second_squared.scaled("standard gravity", "g0", sc.g)

# -----------------------------------------------------------------------------
# Mechanical
# -----------------------------------------------------------------------------

newton = Unit("newton", "N", kinds.Force.DIMENSION)
kilonewton = newton.scaled("kilonewton", "kN", sc.kilo)
dyne = newton.scaled("dyne", "dyn", sc.dyne)
pound_force = newton.scaled("pound-force", "lbf", sc.pound_force)

joule = Unit("joule", "J", kinds.Energy.DIMENSION)
kilojoule = joule.scaled("kilojoule", "kJ", sc.kilo)
megajoule = joule.scaled("megajoule", "MJ", sc.mega)
calorie = joule.scaled("calorie", "cal", sc.calorie)
kilocalorie = joule.scaled("kilocalorie", "kcal", sc.kilo * sc.calorie)
electronvolt = joule.scaled("electronvolt", "eV", sc.electron_volt)
kiloelectronvolt = joule.scaled("kiloelectronvolt", "keV", sc.kilo * sc.electron_volt)
megaelectronvolt = joule.scaled("megaelectronvolt", "MeV", sc.mega * sc.electron_volt)
gigaelectronvolt = joule.scaled("gigaelectronvolt", "GeV", sc.giga * sc.electron_volt)

watt = Unit("watt", "W", kinds.Power.DIMENSION)
kilowatt = watt.scaled("kilowatt", "kW", sc.kilo)
megawatt = watt.scaled("megawatt", "MW", sc.mega)
gigawatt = watt.scaled("gigawatt", "GW", sc.giga)
horsepower = watt.scaled("horsepower", "hp", sc.horsepower)

pascal = Unit("pascal", "Pa", kinds.Pressure.DIMENSION)
kilopascal = pascal.scaled("kilopascal", "kPa", sc.kilo)
megapascal = pascal.scaled("megapascal", "MPa", sc.mega)
bar = pascal.scaled("bar", "bar", sc.bar)
atmosphere = pascal.scaled("atmosphere", "atm", sc.atm)
torr = pascal.scaled("torr", "Torr", sc.torr)
psi = pascal.scaled("pound per square inch", "psi", sc.psi)

hertz = Unit("hertz", "Hz", kinds.Frequency.DIMENSION)
kilohertz = hertz.scaled("kilohertz", "kHz", sc.kilo)
megahertz = hertz.scaled("megahertz", "MHz", sc.mega)
gigahertz = hertz.scaled("gigahertz", "GHz", sc.giga)

radian_per_second = Unit("radian per second", "rad/s", kinds.AngularVelocity.DIMENSION)
rpm = radian_per_second.scaled("revolution per minute", "rpm", 2 * math.pi / sc.minute)

# -----------------------------------------------------------------------------
# Electromagnetic
# -----------------------------------------------------------------------------

coulomb = Unit("coulomb", "C", kinds.Charge.DIMENSION)
millicoulomb = coulomb.scaled("millicoulomb", "mC", sc.milli)
microcoulomb = coulomb.scaled("microcoulomb", "uC", sc.micro)
elementary_charge = coulomb.scaled("elementary charge", "e", sc.elementary_charge)

volt = Unit("volt", "V", kinds.Voltage.DIMENSION)
millivolt = volt.scaled("millivolt", "mV", sc.milli)
microvolt = volt.scaled("microvolt", "uV", sc.micro)
kilovolt = volt.scaled("kilovolt", "kV", sc.kilo)

ohm = Unit("ohm", "Ω", kinds.Resistance.DIMENSION)
milliohm = ohm.scaled("milliohm", "mΩ", sc.milli)
kiloohm = ohm.scaled("kiloohm", "kΩ", sc.kilo)
megaohm = ohm.scaled("megaohm", "MΩ", sc.mega)

farad = Unit("farad", "F", kinds.Capacitance.DIMENSION)
microfarad = farad.scaled("microfarad", "uF", sc.micro)
nanofarad = farad.scaled("nanofarad", "nF", sc.nano)
picofarad = farad.scaled("picofarad", "pF", sc.pico)

henry = Unit("henry", "H", kinds.Inductance.DIMENSION)
millihenry = henry.scaled("millihenry", "mH", sc.milli)
microhenry = henry.scaled("microhenry", "uH", sc.micro)

tesla = Unit("tesla", "T", kinds.MagneticField.DIMENSION)
millitesla = tesla.scaled("millitesla", "mT", sc.milli)
microtesla = tesla.scaled("microtesla", "uT", sc.micro)
gauss = tesla.scaled("gauss", "G", 1e-4)

weber = Unit("weber", "Wb", kinds.MagneticFlux.DIMENSION)
milliweber = weber.scaled("milliweber", "mWb", sc.milli)
maxwell = weber.scaled("maxwell", "Mx", 1e-8)
