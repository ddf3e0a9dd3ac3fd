"""
FastAPI application entry point
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assistant_api.app.api.v1.assistant import routes as assistant
from assistant_api.app.core.config import settings
from assistant_api.app.core.logging_config import setup_logging
from assistant_api.app.db.base import Base
from assistant_api.app.db.session import engine

# Import models so they register with Base.metadata
import assistant_api.app.models  # noqa: F401

logger = setup_logging()

# Create database tables (Alembic owns migrations; this covers fresh local DBs)
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Form field suggestions from user profiles and extracted documents",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(assistant.router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": f"{settings.app_name} API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
