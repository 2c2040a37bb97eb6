#!/usr/bin/env python3
"""Simple script to start the FastAPI server."""

import sys
import os

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from hotel_gateway.config import Settings

if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_environment()

    print("Starting Hotel Gateway API server...")
    print(f"Server will be available at: http://localhost:{settings.port}")
    print(f"API documentation: http://localhost:{settings.port}/docs")
    print("Press Ctrl+C to stop the server")

    # Use the module string for reload to work properly
    uvicorn.run(
        "hotel_gateway.api.server:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        reload_dirs=["src"]
    )
