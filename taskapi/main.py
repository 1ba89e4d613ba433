import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from taskapi.app.config import get_settings
from taskapi.app.core.logging_config import configure_logging
from taskapi.app.deps import backend_label
from taskapi.routes import tasks

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="Task API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins or ["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    configure_logging(get_settings().log_level)
    backend = backend_label()
    if backend == "sql":
        from taskapi.app.db import init_db

        init_db()
    logger.info("Task API starting backend=%s", backend, extra={"backend": backend})


app.include_router(tasks.router, tags=["tasks"])


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return get_settings().root_message


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok", "backend": backend_label()}


def run() -> None:
    import uvicorn

    app_settings = get_settings()
    configure_logging(app_settings.log_level)
    logger.info("Task API running on port %s", app_settings.app_port)
    uvicorn.run(app, host=app_settings.app_host, port=app_settings.app_port)


if __name__ == "__main__":
    run()
