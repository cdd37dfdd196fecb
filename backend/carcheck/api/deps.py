"""
FastAPI dependencies.
"""

from fastapi import Request

from carcheck.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with (see carcheck.main.create_app)."""
    return request.app.state.settings
