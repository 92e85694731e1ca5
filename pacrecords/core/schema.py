from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from pacrecords.core.errors import ErrorKind


class ServiceDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    domain: str
    path: str

    def url(self, query: str = "") -> str:
        """Full request URL; the query is appended verbatim when not empty."""

        full_url = f"https://{self.domain.strip('/')}/{self.path.lstrip('/')}"
        if query:
            full_url += f"?{query}"
        return full_url


class Envelope(BaseModel):
    status: int
    error: str = ""
    content: str | None = None

    @model_validator(mode="after")
    def _check_status(self) -> "Envelope":
        if self.status >= 0 and self.error:
            raise ValueError("successful envelopes must not carry an error")
        if self.status < 0 and not self.error:
            raise ValueError("failed envelopes must describe the error")
        return self

    @classmethod
    def failure(cls, kind: ErrorKind, error: str, content: str | None = None) -> "Envelope":
        return cls(status=int(kind), error=error, content=content)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class CourseError(BaseModel):
    """Single error record returned by the records endpoint."""

    status: str
    error: str
