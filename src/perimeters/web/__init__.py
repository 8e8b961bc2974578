"""FastAPI REST API for perimeter ordering.

This module provides a REST API for generating wall print orders,
reordering layer walls, and validating configurations.

Usage:
    uvicorn perimeters.web:app --reload
"""

from perimeters.web.app import app, create_app

__all__ = ["app", "create_app"]
