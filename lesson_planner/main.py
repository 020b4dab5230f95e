from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from lesson_planner.core.config import get_settings
from lesson_planner.core.logging import configure_logging
from lesson_planner.routers import curriculum, models, plans
from lesson_planner.services.curriculum.store import get_curriculum_store


settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the read-only curriculum store before the first request
    get_curriculum_store()
    yield


app = FastAPI(
    title="Lesson Planner API",
    description="Lgr22-aligned lesson plan generation for teachers",
    version="1.0.0",
    lifespan=lifespan,
)
# Avoid 307 redirects for trailing slash (e.g. /plans/ -> /plans) that can cause redirect loops behind nginx
app.router.redirect_slashes = False

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.frontend_url,
        "http://localhost:3000",
        "http://127.0.0.1",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(plans.router, prefix="/plans", tags=["Lesson Plans"])
app.include_router(curriculum.router, prefix="/curriculum", tags=["Curriculum"])
app.include_router(models.router, prefix="/models", tags=["Models"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
