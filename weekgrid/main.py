import logging

from fastapi import FastAPI

from weekgrid.config import LOG_FORMAT, LOG_LEVEL
from weekgrid.routes import courses, schedule
from weekgrid.scheduling import __version__

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

# Create FastAPI app
app = FastAPI(
    title="Weekgrid API",
    description="Weekly schedule synthesis, optimization and course planning",
    version=__version__
)

# Include routers
app.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
app.include_router(courses.router, prefix="/courses", tags=["courses"])

@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": "Welcome to Weekgrid API",
        "version": __version__,
        "features": [
            "Weekly grid generation from sleep/work preferences",
            "Three-pass schedule optimization",
            "Free time suggestions",
            "Course conflict, workload and semester planning",
        ],
        "endpoints": {
            "generate": "POST /schedule/generate - Build a grid from constraints",
            "optimize": "POST /schedule/optimize - Consolidate work, energy-aware placement, breaks",
            "suggest": "POST /schedule/suggest - Fill Free Time slots",
            "slot": "POST /schedule/slot - Replace a single cell",
            "bulk": "POST /schedule/bulk - Add events from text",
            "statistics": "POST /schedule/statistics - Hours per category and utilization",
            "async": "POST /schedule/{optimize,suggest}/async, GET /schedule/tasks/{task_id}",
            "courses": "POST /courses/{conflicts,workload,recommendations,semester-plan}",
        },
        "swagger_ui": "/docs - Interactive API documentation",
        "redoc": "/redoc - Alternative API documentation"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# This allows running the app directly with: python -m weekgrid.main
if __name__ == "__main__":
    import uvicorn
    from weekgrid.config import API_HOST, API_PORT
    uvicorn.run("weekgrid.main:app", host=API_HOST, port=API_PORT, reload=True)
