#!/usr/bin/env python3
"""
Launcher script for the flowplanner API.
Run this from the root directory to start the application.
"""

import uvicorn
import sys
import os

# Add the current directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    print("🚀 Starting flowplanner API with auto-reload...")
    print("📖 API Documentation: http://localhost:8000/docs")
    print("🔍 Health Check: http://localhost:8000/health")
    print("🛑 Press Ctrl+C to stop the server")
    print("-" * 50)

    # Import string format so reload can re-import the app
    uvicorn.run(
        "flowplanner.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["flowplanner"],
        log_level="info"
    )
