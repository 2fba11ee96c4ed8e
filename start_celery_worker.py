#!/usr/bin/env python3
"""
Start Celery Worker for Weekgrid
"""

import sys

from weekgrid.celery_app import celery_app
from weekgrid.config import LOG_LEVEL

if __name__ == "__main__":
    print("Starting Celery Worker for Weekgrid...")
    print("This will process background optimize/suggest tasks")
    print("Press Ctrl+C to stop")

    try:
        # Start Celery Worker
        celery_app.start(['worker', f'--loglevel={LOG_LEVEL.lower()}'])
    except KeyboardInterrupt:
        print("\nStopping Celery Worker...")
        sys.exit(0)
