"""
Files Manager Server Entry Point

Run with: python main.py
Or with uvicorn: uvicorn app:app --reload
"""

import os

import uvicorn

from files_manager.config import Config

if __name__ == "__main__":
    # Use reload only in development
    is_dev = os.getenv("ENVIRONMENT", "development") == "development"
    config = Config.from_env()

    uvicorn.run(
        "app:app",
        host=config.server.host,
        port=config.server.port,
        reload=is_dev,  # Only reload in development
        log_level="info",
    )
