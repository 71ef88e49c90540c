"""
API module.
"""

from .routes import scenarios_router, teams_router
from .converters import UnknownTeamError

__all__ = [
    "scenarios_router",
    "teams_router",
    "UnknownTeamError",
]
