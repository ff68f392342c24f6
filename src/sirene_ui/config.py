"""
Application settings loaded from the process environment.

A .env file in the working directory is read first, so local development
can keep the INSEE credential out of the shell profile.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from sirene_ui.lib import logs

LOG = logs.logger(__file__)

COMPLETION_URL = "https://data.geopf.fr/geocodage/completion"
ADDRESS_URL = "https://api-adresse.data.gouv.fr/search/"
SIRENE_URL = "https://api.insee.fr/api-sirene/3.11/siret"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    insee_api_key: str | None = None
    completion_url: str = COMPLETION_URL
    address_url: str = ADDRESS_URL
    sirene_url: str = SIRENE_URL
    request_timeout: float = DEFAULT_TIMEOUT
    service_kind: str = "impl"
    app_port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    insee_api_key = os.getenv("INSEE_API_KEY", "").strip() or None
    if not insee_api_key:
        LOG.warning("INSEE_API_KEY is not configured; company lookups will fail.")

    return Settings(
        insee_api_key=insee_api_key,
        completion_url=os.getenv("SIRENE_UI_COMPLETION_URL", COMPLETION_URL),
        address_url=os.getenv("SIRENE_UI_ADDRESS_URL", ADDRESS_URL),
        sirene_url=os.getenv("SIRENE_UI_SIRENE_URL", SIRENE_URL),
        request_timeout=float(os.getenv("SIRENE_UI_TIMEOUT", str(DEFAULT_TIMEOUT))),
        service_kind=os.getenv("SIRENE_UI_SERVICE", "impl").strip().lower(),
        app_port=int(os.getenv("SIRENE_UI_PORT", "8000")),
    )
