"""Decorator-based collection of builders."""

import inspect
import logging
from functools import partial
from typing import Any, Callable, Optional

from lazywire.domain import Builder, BuilderOptions
from lazywire.errors import DependencyError

__all__ = ["BuilderRegistry", "inferred_name"]

logger = logging.getLogger(__name__)


def inferred_name(target: Any) -> str:
    """Derive the service name a construction function is registered under.

    Functions lose any 'make_' prefix, classes keep their name, and callable
    instances are named after their class. Partials carry no usable name and
    must be registered with an explicit one.

    Example:
        >>> inferred_name(make_settings)       # Returns "settings"
        >>> inferred_name(RequestLog)          # Returns "RequestLog"
        >>> inferred_name(RequestLogFactory()) # Returns "RequestLogFactory"

    Raises:
        DependencyError: If no name can be derived from ``target``.
    """
    if inspect.isclass(target):
        return target.__name__

    if isinstance(target, partial):
        raise DependencyError(f"{target} has no name; pass name= explicitly")

    func_name = getattr(target, "__name__", None)
    if func_name is None:
        return type(target).__name__

    if func_name.startswith("make_"):
        return func_name[5:]
    return func_name


class BuilderRegistry:
    """Collects builders declared with the :meth:`provides` decorator.

    Registries are typically defined per module and combined before assembly:

        >>> persistence = BuilderRegistry()
        >>>
        >>> @persistence.provides()
        >>> def make_database(provider: Provider) -> Database:
        ...     return Database(provider.get_service("settings"))
        >>>
        >>> assembly = assemble(combine_builders(
        ...     persistence.registered_builders(), web.registered_builders()
        ... ))
    """

    def __init__(self):
        self._builders: list[Builder] = []

    def register(self, builder: Builder):
        """Register a builder explicitly.

        Args:
            builder: The Builder instance to be registered.
        """
        self._builders.append(builder)
        logger.debug(f"Registered builder '{builder.name}'")

    def registered_builders(self) -> list[Builder]:
        """Retrieve builders in registration order."""
        return list(self._builders)

    def provides(self, name: Optional[str] = None, shared: bool = True) -> Callable:
        """Decorator to register a function as a construction function.

        Args:
            name: Optional service name; defaults to :func:`inferred_name` of the
                decorated callable.
            shared: Whether the built service is reused across lookups.

        Returns:
            A decorator that registers the function and returns it unchanged.

        Example:
            @registry.provides(shared=False)
            def make_request_id(provider: Provider) -> str:
                return str(uuid4())
        """
        def decorator(func):
            if not callable(func):
                raise DependencyError(f"{func} is not callable")

            provided_name = name or inferred_name(func)
            self.register(Builder(provided_name, func, BuilderOptions(shared=shared)))
            return func

        return decorator

    def __len__(self) -> int:
        return len(self._builders)
