"""Per-request accumulation of a web service response body."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from pacrecords.core.errors import ErrorKind
from pacrecords.core.schema import Envelope

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResponseAccumulator:
    """Collects body chunks for a single request.

    ``feed`` is called once per chunk in arrival order.  A chunk delivered
    with a non-2xx status (or a failed transport flag) replaces the body
    with an error record and every later chunk is ignored.
    """

    callbacks: int = 0
    lines: int = 0
    content: str = ""
    error: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error)

    def feed(
        self,
        chunk: str,
        *,
        status_code: int,
        reason: str = "",
        url: str = "",
        success: bool = True,
    ) -> None:
        self.callbacks += 1
        logger.debug(
            "response callback #%d: status=%s success=%s lines so far=%d url=%s",
            self.callbacks,
            status_code,
            success,
            self.lines,
            url,
        )
        if self.failed:
            return

        if not success or not 200 <= status_code < 300:
            self.error = (
                f"ParseWebServiceResponse() FAILED!! (during callback #{self.callbacks}), "
                f"HTTP status: '{status_code}', reason: '{reason}', final URL: '{url}'"
            )
            self.content = Envelope.failure(ErrorKind.RESPONSE_FAILURE, self.error).to_json()
            logger.warning(self.error)
            return

        self.lines += chunk.count("\n")
        self.content += chunk

    def envelope(self) -> Envelope:
        if self.failed:
            return Envelope.failure(ErrorKind.RESPONSE_FAILURE, self.error, self.content)
        return Envelope(status=self.lines, error="", content=self.content)
