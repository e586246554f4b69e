import logging

from fastapi import FastAPI
from flowplanner.config import LOG_LEVEL
from flowplanner.database import engine, Base
from flowplanner import models  # noqa: F401  registers the tables on Base
from flowplanner.routes import schedule, priorities, flow

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title="flowplanner API",
    description="Smart time-blocking, priority scoring and flow protection for personal productivity",
    version="1.0.0"
)

# Include routers
app.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
app.include_router(priorities.router, prefix="/priorities", tags=["priorities"])
app.include_router(flow.router, prefix="/flow", tags=["flow"])

@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": "Welcome to flowplanner API",
        "version": "1.0.0",
        "features": [
            "Smart time-blocking with recovery breaks",
            "Multi-factor priority scoring",
            "Personality-based flow protection"
        ],
        "endpoints": {
            "preview": "POST /schedule/{user_id}/preview - Plan a day without saving",
            "auto": "POST /schedule/{user_id}/auto - Plan a day and save the blocks",
            "blocks": "GET|POST /schedule/{user_id}/blocks - Committed time for a day",
            "priorities": "GET /priorities/{user_id} - Ranked pending activities",
            "recommendations": "GET /priorities/{user_id}/recommendations - Top priorities and quick wins",
            "presets": "GET /flow/presets - Personality presets",
            "flow": "GET /flow/{user_id}/recommendations - Focus advice for the current hour"
        },
        "swagger_ui": "/docs - Interactive API documentation",
        "redoc": "/redoc - Alternative API documentation"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# This allows running the app directly with: python -m flowplanner.main
if __name__ == "__main__":
    import uvicorn
    print("🚀 Starting flowplanner API...")
    print("📖 API Documentation: http://localhost:8000/docs")
    print("🔍 Health Check: http://localhost:8000/health")
    uvicorn.run("flowplanner.main:app", host="0.0.0.0", port=8000, reload=True)
