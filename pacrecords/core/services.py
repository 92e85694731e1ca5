"""Registry of the web services known to the client.

Callers only know a service by name; the registry maps that name to the
domain and path the request is sent to.  Existing services:

``GetRecords``
    Takes one parameter, the course (``SCM``, ``LCM`` or ``SCY``, case
    sensitive), and returns the full set of PAC records for that course
    from the PRODUCTION database.
``GetRecords_dev``
    Same as ``GetRecords`` but reads the DEVELOPMENT database.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable

from pacrecords.core.config import Settings, load_settings
from pacrecords.core.schema import ServiceDescriptor

RECORDS_PATH = "api/pacrecords/GetRecords.php"


class ServiceRegistry:
    """Immutable name -> :class:`ServiceDescriptor` mapping."""

    def __init__(self, services: Iterable[ServiceDescriptor]) -> None:
        table: dict[str, ServiceDescriptor] = {}
        for service in services:
            if service.name in table:
                raise ValueError(f"duplicate service name: {service.name!r}")
            table[service.name] = service
        self._services = MappingProxyType(table)

    def get(self, name: str) -> ServiceDescriptor | None:
        return self._services.get(name)

    def names(self) -> list[str]:
        return list(self._services)


def build_default_registry(settings: Settings | None = None) -> ServiceRegistry:
    settings = settings or load_settings()
    return ServiceRegistry(
        [
            ServiceDescriptor(name="GetRecords", domain=settings.prod_domain, path=RECORDS_PATH),
            ServiceDescriptor(name="GetRecords_dev", domain=settings.dev_domain, path=RECORDS_PATH),
        ]
    )
