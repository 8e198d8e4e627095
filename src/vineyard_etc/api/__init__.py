"""
API layer for weather providers.

Provides the low-level HTTP client and the Open-Meteo forecast operations.
"""

import logging
from typing import Optional

from .client import APIClient
from .open_meteo import OpenMeteoAPI, DAILY_VARIABLES


DEFAULT_OPEN_METEO_URL = "https://api.open-meteo.com/v1"


class OpenMeteoClient(APIClient, OpenMeteoAPI):
    """
    Unified API client for Open-Meteo.

    Combines the HTTP session handling with the forecast operations.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_OPEN_METEO_URL,
        timeout: int = 30,
        max_retries: int = 3,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize Open-Meteo client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            logger=logger
        )


__all__ = [
    "APIClient",
    "OpenMeteoAPI",
    "OpenMeteoClient",
    "DAILY_VARIABLES",
    "DEFAULT_OPEN_METEO_URL",
]
