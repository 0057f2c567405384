"""
Process entrypoint for Jira Gemini Connect.

Architectural role:
- Loads `.env`, configures logging and serves `http_api.app` with uvicorn.
- Reports the descriptor address operators must register with the host.

Startup checks:
- The descriptor's `baseUrl` must equal the service's public address. That is
  not verifiable from inside the process, so the only check is a warning when
  `BASE_URL` was left at its built-in default.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os

import uvicorn

from gemini_connect.connect.descriptor import DESCRIPTOR_PATH
from gemini_connect.connect.settings import base_url_is_default, load_service_settings


logger = logging.getLogger(__name__)


def configure_logging():
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Run the HTTP service on `0.0.0.0:$PORT`."""
    configure_logging()
    settings = load_service_settings()

    if base_url_is_default(settings):
        logger.warning(
            "BASE_URL not set; descriptor advertises default %s. "
            "Host installs fail unless this is the public address.",
            settings.base_url,
        )

    logger.info("Server running on port %s", settings.port)
    logger.info("Descriptor: %s%s", settings.base_url, DESCRIPTOR_PATH)

    from gemini_connect.api.http_api import create_app

    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
