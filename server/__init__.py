"""
LinkedIn token authentication server package.

Hosts the LinkedIn token strategy behind a FastAPI application.
"""
from .app import create_app
from .server import AuthServer

__version__ = "1.0.0"

__all__ = [
    'AuthServer',
    'create_app',
]
