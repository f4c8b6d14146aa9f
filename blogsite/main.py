import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blogsite import dependencies as deps
from blogsite.routers import posts, search
from blogsite.services.page_generator import build_site
from blogsite.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.SITE_TITLE, description="Blog content preview")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.BUILD_ON_STARTUP:
        service = deps.get_posts_service(
            repo=deps.get_posts_repo(), parser=deps.get_content_parser()
        )
        manifest = build_site(service, settings.OUTPUT_DIR)
        logger.info(f"Startup build produced {len(manifest.routes)} routes")

    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(search.router)


@app.get("/")
async def root():
    return {"message": "blogsite is running"}
