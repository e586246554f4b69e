#!/usr/bin/env python3
"""
Start Celery Beat for flowplanner nightly auto-scheduling
"""

import sys
from flowplanner.celery_app import celery_app

if __name__ == "__main__":
    print("Starting Celery Beat for flowplanner...")
    print("This will plan tomorrow's urgent work every night at midnight")
    print("Press Ctrl+C to stop")

    try:
        celery_app.start(['beat', '--loglevel=info'])
    except KeyboardInterrupt:
        print("\nStopping Celery Beat...")
        sys.exit(0)
