"""
Universal and astronomical constants as quantities.

Values are the CODATA recommended values shipped with :mod:`scipy.constants`
unless noted. All constants are built once at import and never change.
"""

import math

from scipy import constants as sc
from scipy.constants import physical_constants

from ..core.dimensions import Dimension
from ..core.quantity import make_quantity, dimensionless
from ..units import (
    meter, kilogram, second, kelvin, coulomb, watt, hertz, year,
    meter_per_second, meter_per_second_squared, solar_mass, earth_mass, Density
)
from ..vector import Vector3


def _codata(key: str) -> float:
    """Value of a CODATA constant by its scipy name."""
    return physical_constants[key][0]


# Action [L^2 M T^-1]
_ACTION = Dimension(length=2, mass=1, time=-1)
# Magnetic moment [L^2 I], J/T
_MAGNETIC_MOMENT = Dimension(length=2, current=1)


SPEED_OF_LIGHT = meter_per_second(sc.c)

PLANCK_CONSTANT = make_quantity(sc.h, _ACTION)
PLANCK_REDUCED = make_quantity(sc.hbar, _ACTION)

GRAVITATIONAL_CONSTANT = make_quantity(sc.G, Dimension(length=3, mass=-1, time=-2))

BOLTZMANN_CONSTANT = make_quantity(
    sc.k, Dimension(length=2, mass=1, time=-2, temperature=-1)
)
AVOGADRO_CONSTANT = make_quantity(sc.N_A, Dimension(amount=-1))
GAS_CONSTANT = make_quantity(
    sc.R, Dimension(length=2, mass=1, time=-2, temperature=-1, amount=-1)
)

VACUUM_PERMITTIVITY = make_quantity(
    sc.epsilon_0, Dimension(length=-3, mass=-1, time=4, current=2)
)
VACUUM_PERMEABILITY = make_quantity(
    sc.mu_0, Dimension(length=1, mass=1, time=-2, current=-2)
)
ELEMENTARY_CHARGE = coulomb(sc.e)
# k_e = 1 / (4 pi eps_0)
COULOMB_CONSTANT = VACUUM_PERMITTIVITY.scale(4 * math.pi) ** -1

STEFAN_BOLTZMANN_CONSTANT = make_quantity(
    sc.sigma, Dimension(mass=1, time=-3, temperature=-4)
)
WIEN_DISPLACEMENT_CONSTANT = make_quantity(sc.Wien, Dimension(length=1, temperature=1))
RYDBERG_CONSTANT = make_quantity(sc.Rydberg, Dimension(length=-1))
FINE_STRUCTURE_CONSTANT = dimensionless(sc.alpha)

BOHR_RADIUS = meter(_codata('Bohr radius'))
BOHR_MAGNETON = make_quantity(_codata('Bohr magneton'), _MAGNETIC_MOMENT)

STANDARD_GRAVITY = meter_per_second_squared(sc.g)
STANDARD_GRAVITY_VECTOR = Vector3.of(meter_per_second_squared, 0.0, 0.0, -sc.g)

ATOMIC_MASS_UNIT = kilogram(sc.atomic_mass)

# Planck units
PLANCK_LENGTH = meter(_codata('Planck length'))
PLANCK_MASS = kilogram(_codata('Planck mass'))
PLANCK_TIME = second(_codata('Planck time'))
PLANCK_TEMPERATURE = kelvin(_codata('Planck temperature'))

# Astronomical (IAU nominal values where scipy has none)
ASTRONOMICAL_UNIT = meter(sc.astronomical_unit)
PARSEC = meter(sc.parsec)
LIGHT_YEAR = meter(sc.light_year)
SOLAR_MASS = solar_mass(1.0)
EARTH_MASS = earth_mass(1.0)
SOLAR_LUMINOSITY = watt(3.828e26)
SOLAR_RADIUS = meter(6.957e8)
EARTH_RADIUS = meter(6.371e6)

# Cosmological (Planck 2018)
HUBBLE_CONSTANT = hertz(2.18e-18)
HUBBLE_TIME = year(14.5e9)
CRITICAL_DENSITY = Density(9.47e-27)
CMB_TEMPERATURE = kelvin(2.7255)


__all__ = [name for name in dir() if name.isupper() and not name.startswith('_')]
