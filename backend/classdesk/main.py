from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session
import os
import logging
from contextlib import asynccontextmanager

from . import __version__
from .database import get_db, check_database_connection, create_tables
from .courses import courses_router
from .assignments import assignments_router
from .attendance import attendance_router
from .peer_reviews import peer_reviews_router
from .grades import grades_router
from .standards import standards_router
from .ar import ar_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the database and make sure the tables exist before serving."""
    logger.info("Starting up ClassDesk teacher API...")
    if os.getenv("PYTEST_CURRENT_TEST") is not None:
        logger.info("Skipping DB connectivity check during tests")
    else:
        if check_database_connection():
            logger.info("Database connection successful")
        else:
            logger.error("Database connection failed")
            raise Exception("Cannot connect to database")
        create_tables()
    yield
    logger.info("Shutting down ClassDesk teacher API...")


app = FastAPI(
    title="ClassDesk Teacher API",
    description="Teacher-side course, grading, attendance and peer review tools",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(courses_router)
app.include_router(assignments_router)
app.include_router(attendance_router)
app.include_router(peer_reviews_router)
app.include_router(grades_router)
app.include_router(standards_router)
app.include_router(ar_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "ClassDesk Teacher API", "version": __version__}


@app.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """Health check endpoint with database connectivity test."""
    try:
        db.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "database": "connected",
            "version": __version__
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
            "version": __version__
        }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
