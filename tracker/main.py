import logging
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from tracker.core.config import load_config
from tracker.routes.health import router as health_router
from tracker.routes.meetings import router as meetings_router

logging.basicConfig(level=getattr(logging, load_config().log_level, logging.INFO))

app = FastAPI(title="Meeting Tracker")


# Routes
app.include_router(health_router, tags=["health"])
app.include_router(meetings_router, prefix="/meetings", tags=["meetings"])


@app.get("/")
def root():
    return RedirectResponse(url="/meetings/upcoming")
