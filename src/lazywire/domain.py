"""Domain models used throughout the framework."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from lazywire.provider import Provider

__all__ = ["BuildFunction", "BuilderOptions", "Builder"]


BuildFunction = Callable[["Provider"], Any]
"""Type alias for construction functions.

A construction function receives the :class:`~lazywire.provider.Provider` that is
resolving it, and may use it to request its own dependencies. It returns the built
service, or raises to signal failure.
"""


@dataclass(frozen=True)
class BuilderOptions:
    """Options controlling how a builder's result is reused.

    Attributes:
        shared: If True, the result of the first single-service lookup is cached and
            returned for every later lookup in the same assembly. If False, the
            construction function runs again on every lookup.
    """

    shared: bool = True


@dataclass(frozen=True)
class Builder:
    """A named recipe for producing one service instance.

    Attributes:
        name: The service name this builder is registered under. Several builders
            may share a name, forming a multi-binding.
        func: The construction function.
        options: Reuse options for the built value.
    """

    name: str
    func: BuildFunction
    options: BuilderOptions = field(default_factory=BuilderOptions)

    def build(self, provider: "Provider") -> Any:
        """Invoke the construction function with the given provider."""
        return self.func(provider)
