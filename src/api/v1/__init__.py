"""
API v1 package.

Contains versioned JSON routes for the sign-up flow.
"""

from src.api.v1.routes import router

__all__ = ["router"]
