"""
ASGI entry point.

Run with: uvicorn store_admin.main:app
"""

from store_admin.core.app_factory import create_app

app = create_app()
