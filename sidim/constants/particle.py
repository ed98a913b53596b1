"""
Particle properties.

Masses, charges, rest energies, magnetic moments and Compton wavelengths are
CODATA values from :mod:`scipy.constants`; lifetimes and boson masses are
Particle Data Group values.
"""

from scipy import constants as sc
from scipy.constants import physical_constants

from ..core.dimensions import Dimension
from ..core.quantity import make_quantity
from ..units import (
    kilogram, second, microsecond, coulomb, joule, meter,
    megaelectronvolt, gigaelectronvolt
)


def _codata(key: str) -> float:
    return physical_constants[key][0]


def _magnetic_moment(key: str):
    # J/T = A m^2
    return make_quantity(_codata(key), Dimension(length=2, current=1))


# Electron
ELECTRON_MASS = kilogram(sc.m_e)
ELECTRON_CHARGE = coulomb(-sc.e)
ELECTRON_REST_ENERGY = joule(_codata('electron mass energy equivalent'))
ELECTRON_REST_ENERGY_MEV = megaelectronvolt.magnitude_of(ELECTRON_REST_ENERGY)
ELECTRON_MAGNETIC_MOMENT = _magnetic_moment('electron mag. mom.')
ELECTRON_G_FACTOR = _codata('electron g factor')
ELECTRON_COMPTON_WAVELENGTH = meter(_codata('Compton wavelength'))

# Proton
PROTON_MASS = kilogram(sc.m_p)
PROTON_CHARGE = coulomb(sc.e)
PROTON_REST_ENERGY = joule(_codata('proton mass energy equivalent'))
PROTON_REST_ENERGY_MEV = megaelectronvolt.magnitude_of(PROTON_REST_ENERGY)
PROTON_MAGNETIC_MOMENT = _magnetic_moment('proton mag. mom.')
PROTON_G_FACTOR = _codata('proton g factor')
PROTON_COMPTON_WAVELENGTH = meter(_codata('proton Compton wavelength'))

# Neutron
NEUTRON_MASS = kilogram(sc.m_n)
NEUTRON_CHARGE = coulomb(0.0)
NEUTRON_REST_ENERGY = joule(_codata('neutron mass energy equivalent'))
NEUTRON_REST_ENERGY_MEV = megaelectronvolt.magnitude_of(NEUTRON_REST_ENERGY)
NEUTRON_MAGNETIC_MOMENT = _magnetic_moment('neutron mag. mom.')
NEUTRON_G_FACTOR = _codata('neutron g factor')
NEUTRON_COMPTON_WAVELENGTH = meter(_codata('neutron Compton wavelength'))
NEUTRON_MEAN_LIFETIME = second(879.4)

# Muon
MUON_MASS = kilogram(_codata('muon mass'))
MUON_CHARGE = coulomb(-sc.e)
MUON_REST_ENERGY = joule(_codata('muon mass energy equivalent'))
MUON_REST_ENERGY_MEV = megaelectronvolt.magnitude_of(MUON_REST_ENERGY)
MUON_MEAN_LIFETIME = microsecond(2.1969811)

# Tau
TAU_MASS = kilogram(_codata('tau mass'))
TAU_CHARGE = coulomb(-sc.e)
TAU_REST_ENERGY = joule(_codata('tau mass energy equivalent'))
TAU_REST_ENERGY_MEV = megaelectronvolt.magnitude_of(TAU_REST_ENERGY)
TAU_MEAN_LIFETIME = second(2.903e-13)

# Mass ratios (dimensionless floats)
PROTON_ELECTRON_MASS_RATIO = _codata('proton-electron mass ratio')
NEUTRON_ELECTRON_MASS_RATIO = _codata('neutron-electron mass ratio')
NEUTRON_PROTON_MASS_RATIO = _codata('neutron-proton mass ratio')
MUON_ELECTRON_MASS_RATIO = _codata('muon-electron mass ratio')

# Light nuclei
DEUTERON_MASS = kilogram(_codata('deuteron mass'))
HELION_MASS = kilogram(_codata('helion mass'))
ALPHA_PARTICLE_MASS = kilogram(_codata('alpha particle mass'))

# Electroweak and strong sector
FERMI_COUPLING_CONSTANT = _codata('Fermi coupling constant')  # GeV^-2
WEAK_MIXING_ANGLE = _codata('weak mixing angle')
STRONG_COUPLING_CONSTANT = 0.1179
W_BOSON_REST_ENERGY = gigaelectronvolt(80.379)
Z_BOSON_REST_ENERGY = gigaelectronvolt(91.1876)
HIGGS_REST_ENERGY = gigaelectronvolt(125.09)


__all__ = [name for name in dir() if name.isupper() and not name.startswith('_')]
