from dotenv import load_dotenv
load_dotenv()

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

import config
from errors import StudyTrackerError
from routes import health, session, suggestion
from store import SessionStore

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _describe_request_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # Integer parts are list indexes or, for json_invalid, a byte offset
        loc = ".".join(p for p in err.get("loc", ()) if isinstance(p, str) and p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(store: Optional[SessionStore] = None) -> FastAPI:
    app = FastAPI(title="Smart Study Habit Tracker API", version="0.1.0")
    app.state.store = store if store is not None else SessionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StudyTrackerError)
    async def tracker_error_handler(request: Request, exc: StudyTrackerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_request_error(exc)
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    app.include_router(health.router)
    app.include_router(session.router)
    app.include_router(suggestion.router)

    # Mounted last so /api/* keeps priority over the front-end files
    static_dir = config.STATIC_DIR
    if not os.path.isabs(static_dir):
        static_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), static_dir)
    if os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info("Serving front end from %s", static_dir)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
