import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError as PayloadValidationError
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.routing import Mount

from sheetwriter.config import get_settings
from sheetwriter.mcp_server import mcp
from sheetwriter.models.common import InvalidPayloadResponse
from sheetwriter.routers.write import router as write_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _payload_field(loc) -> str:
    """'secrets.GOOGLE_SERVICE_ACCOUNT_KEY' for ('body', 'secrets', ...); 'body' when the body itself is bad."""
    parts = [str(p) for p in loc[1:] if isinstance(p, str)]
    return ".".join(parts) or "body"


configure_logging()


# --- FastAPI app ---

api = FastAPI(title="Sheetwriter", version="0.1.0")
api.include_router(write_router)


@api.get("/")
def health() -> dict:
    return {"status": "ok", "message": "Google Sheets Tool is running."}


# --- Exception handlers ---

@api.exception_handler(PayloadValidationError)
async def payload_error_handler(request: Request, exc: PayloadValidationError):
    fields = list(dict.fromkeys(_payload_field(error.get("loc", ())) for error in exc.errors()))
    logger.warning("Rejected malformed payload: %s", ", ".join(fields))
    body = InvalidPayloadResponse(
        message=f"Invalid request payload: {', '.join(fields)}",
        help="Send a JSON object with string fields sheet_id, range, summary, mode "
             "and an object secrets holding GOOGLE_SERVICE_ACCOUNT_KEY.",
        fields=fields,
    )
    return JSONResponse(status_code=400, content=body.to_json_dict())


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=mcp_app.lifespan,
)


def run():
    settings = get_settings()
    uvicorn.run(
        "sheetwriter.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
