"""Service-level settings for the Connect app.

Relevant environment variables:
    - `BASE_URL`: externally reachable address of this service. It must match
      the address the host platform uses, otherwise installs break silently.
    - `PORT`: listen port for `gemini_connect.api.main`.
    - `PUBLIC_DIR`: directory served under `/public`.
    - `DEBUG`: `"true"` enables verbose adapter logging.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://jira-plugin-connect-clean-1.onrender.com"
DEFAULT_PORT = 3000

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DEFAULT_PUBLIC_DIR = os.path.join(BASE_DIR, "public")


@dataclass(frozen=True)
class ServiceSettings:
    base_url: str = DEFAULT_BASE_URL
    port: int = DEFAULT_PORT
    public_dir: str = DEFAULT_PUBLIC_DIR
    debug: bool = False


def load_service_settings() -> ServiceSettings:
    """Build `ServiceSettings` from the current environment."""
    base_url = (os.getenv("BASE_URL") or "").strip() or DEFAULT_BASE_URL

    return ServiceSettings(
        base_url=base_url.rstrip("/"),
        port=int(os.getenv("PORT") or DEFAULT_PORT),
        public_dir=os.getenv("PUBLIC_DIR") or DEFAULT_PUBLIC_DIR,
        debug=os.getenv("DEBUG") == "true",
    )


def base_url_is_default(settings: ServiceSettings) -> bool:
    """True when the descriptor will advertise the built-in fallback address."""
    return settings.base_url == DEFAULT_BASE_URL.rstrip("/")
