"""FastAPI REST API for BOM calculation.

This module provides a REST API for calculating bills of materials,
browsing calculation history, and listing reference rates.

Usage:
    uvicorn furnili.web:app --reload
"""

from furnili.web.app import app, create_app

__all__ = ["app", "create_app"]
