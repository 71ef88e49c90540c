"""
API route modules.
"""

from .scenarios_routes import router as scenarios_router
from .teams_routes import router as teams_router

__all__ = ["scenarios_router", "teams_router"]
