import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from support_portal.routers import pages, posts
from support_portal.settings import settings
from support_portal.templating import STATIC_DIR

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Support Portal",
    description="Markdown knowledge base with search and table of contents",
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(pages.router)
app.include_router(posts.router)


@app.get("/health")
async def health():
    return {"message": "Support portal is running"}
