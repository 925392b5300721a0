"""CLI package for the LinkedIn token strategy

Inspect requested profile fields, fetch profiles for a token and run the
authentication server.
"""

from cli.main import main

__all__ = [
    "main",
]
