from fastapi import FastAPI

from lintrelay.api.lint_routes import router as lint_router
from lintrelay.core.logging import setup_logging

VERSION = "0.1.0"

setup_logging()

app = FastAPI(title="lintrelay", version=VERSION)

app.include_router(lint_router)


@app.get("/health")
def health():
    return {"status": "healthy", "version": VERSION}
