"""Sample upstream client.

This module defines a small client for the "sample" upstream service,
which answers ``GET <path>`` with a JSON body of the form
``{"name": ..., "description": ...}``.  The client uses the
``requests`` library internally.

The client never propagates transport errors: when the upstream is
unreachable, answers with an error status or returns a body that does
not match :class:`SampleResponse`, the failure is logged and the empty
fallback response is returned instead.  Callers can therefore render
the result without handling exceptions.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from scdemo_api.app.core.config import settings
from scdemo_api.app.schemas.sample import SampleResponse


logger = logging.getLogger(__name__)


class SampleClient:
    """Client for the sample upstream service."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the upstream, e.g. ``http://localhost:8080``.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_sample(self, path: str) -> SampleResponse:
        """Fetch ``path`` from the upstream.

        Returns the parsed response, or ``SampleResponse.create_empty()``
        when the call fails for any reason.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return SampleResponse.model_validate(response.json())
        except requests.RequestException as exc:
            logger.error("Sample request to %s failed: %s", url, exc)
        except (ValueError, ValidationError) as exc:
            logger.error("Sample response from %s is malformed: %s", url, exc)
        return self.fallback()

    @staticmethod
    def fallback() -> SampleResponse:
        logger.info("Using sample fallback response")
        return SampleResponse.create_empty()

    def close(self) -> None:
        self.session.close()


_client: Optional[SampleClient] = None


def get_sample_client() -> SampleClient:
    """Return the shared client, built from settings on first use."""
    global _client
    if _client is None:
        _client = SampleClient(base_url=settings.sample_base_url, timeout=settings.sample_timeout_seconds)
    return _client


def close_sample_client() -> None:
    """Close the shared client's session; the next call builds a new one."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
