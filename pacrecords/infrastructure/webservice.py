"""Generic client for the PAC web services."""
from __future__ import annotations

import logging

import httpx

from pacrecords.core.config import load_settings
from pacrecords.core.errors import ErrorKind
from pacrecords.core.schema import Envelope
from pacrecords.core.services import ServiceRegistry, build_default_registry
from pacrecords.domain import ResponseAccumulator

logger = logging.getLogger(__name__)

# Status reported when the request never produced an HTTP response.
INTERNAL_EXCEPTION_STATUS = 599


class WebServiceClient:
    """Issue GET requests to named web services and wrap the answer.

    Every call returns a JSON string with ``status``, ``error`` and, when
    the service produced one, ``content``.  ``status`` is the number of
    lines in the content on success and a negative :class:`ErrorKind`
    otherwise; errors are never raised to the caller.
    """

    def __init__(
        self,
        registry: ServiceRegistry | None = None,
        *,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if registry is None or timeout is None:
            settings = load_settings()
            if registry is None:
                registry = build_default_registry(settings)
            timeout = settings.http_timeout if timeout is None else timeout
        self._registry = registry
        self._client = http_client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._owns_client = http_client is None

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _fetch(self, full_url: str) -> Envelope:
        accumulator = ResponseAccumulator()
        try:
            with self._client.stream("GET", full_url) as response:
                meta = {
                    "status_code": response.status_code,
                    "reason": response.reason_phrase,
                    "url": str(response.url),
                }
                for chunk in response.iter_text():
                    accumulator.feed(chunk, **meta)
                    if accumulator.failed:
                        break
                if accumulator.callbacks == 0:
                    accumulator.feed("", **meta)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            reason = str(exc) or type(exc).__name__
            error = (
                f"HTTP error: '{INTERNAL_EXCEPTION_STATUS}', reason: '{reason}', "
                f"final URL: '{full_url}'"
            )
            logger.warning(error)
            return Envelope.failure(ErrorKind.HTTP_FAILURE, error)

        return accumulator.envelope()

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def invoke(self, service_name: str, request: str = "") -> Envelope:
        """Call a service and return the envelope as a model."""

        service = self._registry.get(service_name)
        if service is None:
            logger.warning("illegal service name: %r", service_name)
            return Envelope.failure(
                ErrorKind.ILLEGAL_SERVICE, f"Illegal service name: '{service_name}'"
            )

        full_url = service.url(request)
        logger.debug("requesting %s for service %s", full_url, service_name)
        envelope = self._fetch(full_url)
        logger.debug("service %s returned status %d", service_name, envelope.status)
        return envelope

    def get_data(self, service_name: str, request: str = "") -> str:
        """Call a service and return the JSON envelope."""

        return self.invoke(service_name, request).to_json()

    def get_records(self, course: str) -> str:
        """PAC records of a course from the PRODUCTION database."""

        return self.get_data("GetRecords", course)

    def get_records_dev(self, course: str) -> str:
        """PAC records of a course from the DEVELOPMENT database."""

        return self.get_data("GetRecords_dev", course)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "WebServiceClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["WebServiceClient", "INTERNAL_EXCEPTION_STATUS"]
