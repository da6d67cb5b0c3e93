import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from makos.dependencies import get_gtag
from makos.routers import auth, blog, pages
from makos.services.auth_client import create_auth_client
from makos.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Makos.ai", description="AI worksheet generator for teachers")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing auth configuration aborts startup
    app.state.auth_client = create_auth_client(settings)
    logger.info("Makos.ai web started")

    try:
        yield
    finally:
        logger.info("Makos.ai web exited gracefully")


app.router.lifespan_context = lifespan

app.include_router(pages.router, dependencies=[Depends(get_gtag)])
app.include_router(auth.router, dependencies=[Depends(get_gtag)])
app.include_router(blog.router, dependencies=[Depends(get_gtag)])


@app.get("/health")
async def health():
    return {"message": "Makos.ai web is running"}
