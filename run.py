#!/usr/bin/env python3
"""
Simple launcher script for the Weekgrid API.
Run this from the root directory to start the application.
"""

import uvicorn

from weekgrid.config import API_HOST, API_PORT, LOG_LEVEL

if __name__ == "__main__":
    print("Starting Weekgrid API with auto-reload...")
    print(f"API Documentation: http://localhost:{API_PORT}/docs")
    print(f"Health Check: http://localhost:{API_PORT}/health")
    print("Press Ctrl+C to stop the server")
    print("-" * 50)

    # Use import string format for reload to work properly
    uvicorn.run(
        "weekgrid.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
        reload_dirs=["weekgrid"],  # Watch the package directory for changes
        log_level=LOG_LEVEL.lower()
    )
