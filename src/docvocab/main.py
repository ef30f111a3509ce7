import logging
import shutil

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from docvocab.api import router as vocabulary_router
from docvocab.config import Settings, get_settings
from docvocab.errors import PDFTOTEXT_GUIDANCE
from docvocab.logging_config import configure_logging
from docvocab.telemetry import emit_app_startup_event

configure_logging()

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Document Vocabulary API")
app.include_router(vocabulary_router)


@app.on_event("startup")
async def _startup_diagnostics() -> None:
    """Log the effective configuration and external tool availability."""

    emit_app_startup_event(pdftotext_binary=get_settings().pdftotext_binary)


@app.get("/healthz", response_class=PlainTextResponse)
def healthcheck() -> str:
    """Liveness probe used by container orchestrators."""
    return "ok"


@app.get("/healthz/tools")
def tools_healthcheck(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    """Report whether the external PDF extraction tool can be found."""

    location = shutil.which(settings.pdftotext_binary)
    payload: dict[str, object] = {
        "binary": settings.pdftotext_binary,
        "available": location is not None,
        "path": location,
    }
    if location is None:
        payload["reason"] = PDFTOTEXT_GUIDANCE
    return payload
