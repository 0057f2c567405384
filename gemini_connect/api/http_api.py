"""
HTTP API adapter for Jira Gemini Connect.

Architectural role:
- Expose the Atlassian Connect descriptor and lifecycle callbacks.
- Expose the `/api/gemini` prompt proxy used by the issue panel.
- Delegate completion work to `gemini_connect.llm.service.complete`.
- Normalize proxy results to the JSON response contract.

Endpoint responsibilities:
- `GET /`: liveness text.
- `GET /atlassian-connect.json`: static descriptor bound to `BASE_URL`.
- `POST /installed`, `POST /uninstalled`: stateless 204 acknowledgements.
- `POST /api/gemini`: validate input, resolve provider config, invoke proxy.
- `/public/*`: static panel and dialog assets, when the directory exists.

API request lifecycle (`POST /api/gemini`):
1. Parse request JSON and read `prompt`.
2. Resolve `ProviderConfig` for this request (never cached).
3. Call `complete(prompt, config)`.
4. Map the result to `{response}` or `{error, details?}` with its status.

Error handling strategy:
- Malformed JSON or a non-object body is an `InvalidRequest` (400).
- Proxy failures arrive as values and are mapped by `to_response_body`.
- Anything that still escapes a route is caught by the app-level handler,
  logged, and returned as a 500 JSON envelope.

Side effects:
- Logs lifecycle callbacks and failures; never logs the API key.
- Emits request-level debug logs only when `DEBUG == "true"`.
"""

import json
import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from gemini_connect.connect.descriptor import (
    DESCRIPTOR_PATH,
    INSTALLED_PATH,
    UNINSTALLED_PATH,
    build_descriptor,
)
from gemini_connect.connect.settings import ServiceSettings, load_service_settings
from gemini_connect.core.errors import InvalidRequest
from gemini_connect.core.results import CompletionFailure, to_response_body
from gemini_connect.llm.provider_config import load_provider_config
from gemini_connect.llm.service import complete


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal error"


async def _read_json(request: Request):
    """Return the decoded JSON body, or `None` when it is empty or malformed."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def create_app(
    settings: ServiceSettings | None = None,
    config_loader=load_provider_config,
    transport=None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Service settings; read from the environment when omitted.
        config_loader: Zero-argument callable returning a `ProviderConfig`.
            Called once per prompt request.
        transport: Optional httpx transport forwarded to the proxy, used by
            tests to stub the upstream.
    """
    settings = settings or load_service_settings()
    app = FastAPI(title="Jira Gemini Connect")

    # ============================================================
    # Outermost boundary
    # ============================================================

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": INTERNAL_ERROR_MESSAGE, "details": str(exc)},
        )

    # ============================================================
    # Liveness + Descriptor
    # ============================================================

    @app.get("/")
    def root():
        return PlainTextResponse("Jira Gemini Connect is running.")

    @app.get(DESCRIPTOR_PATH)
    def descriptor():
        """Return the Connect descriptor; `baseUrl` must equal the public address."""
        return JSONResponse(status_code=200, content=build_descriptor(settings.base_url))

    # ============================================================
    # Lifecycle hooks (stateless acknowledgements)
    # ============================================================

    @app.post(INSTALLED_PATH)
    async def installed(request: Request):
        body = await _read_json(request)
        if isinstance(body, dict):
            logger.info(
                "Installed: host=%s clientKey=%s",
                body.get("baseUrl"),
                body.get("clientKey"),
            )
        else:
            logger.info("Installed: payload without host details")
        return Response(status_code=204)

    @app.post(UNINSTALLED_PATH)
    async def uninstalled(request: Request):
        body = await _read_json(request)
        if isinstance(body, dict):
            logger.info(
                "Uninstalled: host=%s clientKey=%s",
                body.get("baseUrl"),
                body.get("clientKey"),
            )
        else:
            logger.info("Uninstalled")
        return Response(status_code=204)

    # ============================================================
    # Gemini prompt proxy
    # ============================================================

    @app.post("/api/gemini")
    async def gemini(request: Request):
        """
        Proxy one prompt to Gemini.

        Response formatting:
        - 200 `{"response": text}` on success.
        - `{"error": message, "details"?: any}` with 400 / 500 / 502 or the
          upstream status on failure.
        """
        body = await _read_json(request)
        prompt = body.get("prompt") if isinstance(body, dict) else None

        if settings.debug:
            logger.info("Prompt request: %d chars", len(prompt) if isinstance(prompt, str) else 0)

        if not isinstance(prompt, str):
            result = CompletionFailure.from_error(InvalidRequest("prompt required"))
        else:
            result = await complete(prompt, config_loader(), transport=transport)

        status_code, content = to_response_body(result)

        if settings.debug:
            logger.info("Prompt response status: %s", status_code)

        return JSONResponse(status_code=status_code, content=content)

    # ============================================================
    # Static assets
    # ============================================================

    if os.path.isdir(settings.public_dir):
        app.mount("/public", StaticFiles(directory=settings.public_dir), name="public")
    else:
        logger.info("Static directory %s not found; /public not mounted", settings.public_dir)

    return app


app = create_app()
