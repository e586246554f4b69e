#!/usr/bin/env python3
"""
Start Celery Worker for flowplanner
"""

import sys
from flowplanner.celery_app import celery_app

if __name__ == "__main__":
    print("Starting Celery Worker for flowplanner...")
    print("This will process the nightly auto-scheduling tasks")
    print("Press Ctrl+C to stop")

    try:
        celery_app.start(['worker', '--loglevel=info'])
    except KeyboardInterrupt:
        print("\nStopping Celery Worker...")
        sys.exit(0)
