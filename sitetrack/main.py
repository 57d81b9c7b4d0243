
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from sitetrack.core.config import settings
from sitetrack.db.session import init_db
from sitetrack.routers import (
    assignments, clients, dashboard, pages, photos, projects, storage, users, visits, webhooks
)

logging.basicConfig(level=settings.LOG_LEVEL.upper())

app = FastAPI(title=settings.PROJECT_NAME)

app.mount("/static", StaticFiles(directory=str(Path(__file__).resolve().parent / "static")), name="static")

app.include_router(pages.router)
for module in (clients, projects, visits, photos, assignments, users, storage, dashboard, webhooks):
    app.include_router(module.router, prefix=settings.API_PREFIX)

# Create tables on startup (Simple approach)
@app.on_event("startup")
def on_startup():
    init_db()
