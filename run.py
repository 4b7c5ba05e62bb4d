"""Entry point for the SC Demo API.

Serves ``scdemo_api.app.main:app`` with Uvicorn.  Host and port are
read from the environment variables ``HOST`` and ``PORT``; defaults
are ``0.0.0.0`` and ``8000``.  Other settings (Redis URL, database
path, log level) are read by ``scdemo_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os
from uvicorn import Config, Server

from scdemo_api.app.main import app


async def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
