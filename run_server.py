#!/usr/bin/env python3
"""
Server launcher for the Reel Gateway API.

Reads API_PORT and LOG_LEVEL from the environment and starts uvicorn.
Set RELOAD=true for auto-reload during local development.
"""

import os
import uvicorn

from reel_gateway.config.environment import load_environment_config

if __name__ == "__main__":
    settings = load_environment_config()
    reload = os.environ.get("RELOAD", "false").lower() == "true"

    print("Starting Reel Gateway API Server")
    print(f"Environment: {settings.environment}")
    print(f"Server will be available at: http://localhost:{settings.api_port}")
    print(f"API documentation at: http://localhost:{settings.api_port}/docs")
    print("\n" + "="*50 + "\n")

    uvicorn.run(
        "reel_gateway.api.main:app",
        host="0.0.0.0",  # Accept connections from any IP
        port=settings.api_port,
        reload=reload,
        log_level=settings.log_level,
    )
