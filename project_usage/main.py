from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from project_usage import __version__
from project_usage.config import settings
from project_usage.logger import logger
from project_usage.models.database import engine, Base
from project_usage.api.routes import health, projects

# --------- Lifespan context manager ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables
    Base.metadata.create_all(bind=engine)
    logger.info(f"API Startup. Database: {settings.DATABASE_URL}")
    yield

app = FastAPI(
    title="Project Usage API",
    version=__version__,
    description="Current resource allocations of compute/storage projects",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(health.router)
app.include_router(projects.router)

@app.get("/")
async def root():
    return {"message": "Project Usage API", "version": __version__}
