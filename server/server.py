"""
AuthServer class for CLI control of the FastAPI application.
"""
import logging
from typing import Optional

import uvicorn

from settings import PORT, LOG_LEVEL, BIND_ADDRESS
from .app import create_app

logger = logging.getLogger(__name__)


class AuthServer:
    """Authentication server wrapper for CLI control"""

    def __init__(self, debug: bool = False, bind_address: Optional[str] = None, port: Optional[int] = None):
        self.server = None
        self.config = None
        self.debug = debug
        self.bind_address = bind_address or BIND_ADDRESS
        self.port = port or PORT

    def run(self):
        """Run the server (blocking)"""
        app = create_app()
        logger.info(f"Starting LinkedIn token auth server on http://{self.bind_address}:{self.port}")
        logger.info("Available endpoints: /auth/linkedin/token, /health")
        self.config = uvicorn.Config(
            app,
            host=self.bind_address,
            port=self.port,
            log_level="debug" if self.debug else LOG_LEVEL,
            access_log=False
        )
        self.server = uvicorn.Server(self.config)
        self.server.run()

    def stop(self):
        """Stop the server"""
        if self.server:
            self.server.should_exit = True
