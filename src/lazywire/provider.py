"""Capability interfaces exposed to callers and construction functions."""

from typing import Any, Protocol, runtime_checkable

__all__ = ["Assembly", "Provider"]


@runtime_checkable
class Assembly(Protocol):
    """A finished container that resolves single services by name."""

    def get_service(self, name: str) -> Any:
        ...


@runtime_checkable
class Provider(Protocol):
    """The lookup surface handed to every construction function.

    Construction functions use it to request their own dependencies, either as a
    single service or as the collection of all services registered under a name.
    """

    def get_service(self, name: str) -> Any:
        ...

    def get_services(self, name: str) -> list[Any]:
        ...
