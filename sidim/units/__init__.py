"""
Typed quantity kinds and named units built on the dimensional core.
"""

from .kinds import (
    Kind, KINDS, KIND_BY_DIMENSION, kind_for, derive,
    Dimensionless, Length, Mass, Time, Current, Temperature, Amount,
    LuminousIntensity, Area, Volume, Velocity, Acceleration, Force, Energy,
    Power, Pressure, Frequency, Momentum, Density, Charge, Voltage,
    Resistance, Capacitance, Inductance, MagneticField, MagneticFlux,
    AngularVelocity, Torque
)
from .definitions import (
    Unit,
    # length
    meter, millimeter, centimeter, kilometer, micrometer, nanometer, angstrom,
    inch, foot, mile, astronomical_unit, light_year, parsec,
    # mass
    kilogram, gram, milligram, microgram, tonne, pound, ounce,
    atomic_mass_unit, solar_mass, earth_mass,
    # time
    second, millisecond, microsecond, nanosecond, minute, hour, day, week, year,
    # current, temperature, amount, luminous intensity
    ampere, milliampere, microampere, kiloampere,
    kelvin, celsius, fahrenheit,
    mole, millimole, micromole, kilomole,
    candela, millicandela, kilocandela,
    # geometric and kinematic
    square_meter, square_centimeter, square_kilometer, hectare,
    cubic_meter, liter, milliliter, cubic_centimeter,
    meter_per_second, kilometer_per_hour, mile_per_hour, speed_of_light,
    meter_per_second_squared, standard_gravity,
    # mechanical
    newton, kilonewton, dyne, pound_force,
    joule, kilojoule, megajoule, calorie, kilocalorie, electronvolt,
    kiloelectronvolt, megaelectronvolt, gigaelectronvolt,
    watt, kilowatt, megawatt, gigawatt, horsepower,
    pascal, kilopascal, megapascal, bar, atmosphere, torr, psi,
    hertz, kilohertz, megahertz, gigahertz,
    radian_per_second, rpm,
    # electromagnetic
    coulomb, millicoulomb, microcoulomb, elementary_charge,
    volt, millivolt, microvolt, kilovolt,
    ohm, milliohm, kiloohm, megaohm,
    farad, microfarad, nanofarad, picofarad,
    henry, millihenry, microhenry,
    tesla, millitesla, microtesla, gauss,
    weber, milliweber, maxwell
)
