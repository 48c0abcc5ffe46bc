"""Where an RPC service is served over plain HTTP: service name -> base URL(s)."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class ServiceDiscovery(Protocol):
    """
    Base URL lookup for RpcClient, used when call options carry no base URL.
    Names are the stub's service names, fully qualified or short.
    """

    def resolve(self, service_name: str) -> list[str]:
        """Base URLs serving the service's HTTP routes; empty when unknown."""
        ...


def static_discovery(services: dict[str, str]) -> ServiceDiscovery:
    """Fixed table, e.g. Settings.services built from GRPT_<SERVICE>_BASE_URL."""
    return StaticDiscovery(services)


class StaticDiscovery:
    """
    Service table keyed by full name ("demo.v1.Users") or short name ("Users").
    A full name missing from the table is retried under its short name.
    """

    def __init__(self, services: dict[str, str]) -> None:
        self._services = dict(services)

    def resolve(self, service_name: str) -> list[str]:
        url = self._services.get(service_name)
        if not url and "." in service_name:
            url = self._services.get(service_name.rsplit(".", 1)[1])
        return [url] if url else []
