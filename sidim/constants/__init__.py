"""
Physical constants as frozen, pre-built quantities.
"""

from .universal import *  # noqa: F401,F403
from .particle import *  # noqa: F401,F403
from . import universal, particle

__all__ = universal.__all__ + particle.__all__
