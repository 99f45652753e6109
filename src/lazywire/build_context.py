"""The lazy resolution engine behind an assembly.

A :class:`BuildContext` holds the builders it was assembled from, a cache of
already-built services and the stack of names currently under construction. It
acts as the :class:`~lazywire.provider.Provider` for every builder it invokes, so
construction functions resolve their dependencies recursively through the same
context.

Resolution is lazy: nothing is built until it is requested, and only the
dependency subgraph reachable from the requested name is materialised. Requesting
a name that is already on the dependency stack means the graph contains a cycle,
which is reported immediately with the full dependency path.
"""

import logging
from collections import defaultdict
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from lazywire.domain import Builder
from lazywire.errors import (
    AmbiguousBuilderError,
    BindingShapeError,
    BuildError,
    CircularDependencyError,
    DependencyError,
    MissingBuilderError,
)

__all__ = ["BuildContext"]

logger = logging.getLogger(__name__)


class BuildContext:
    """Resolve services by name, caching shared results.

    The context is not thread-safe: its cache and dependency stack are shared by
    every lookup made through it.

    Example:
        >>> context = BuildContext([
        ...     make_builder("greeting", lambda _: "Hello"),
        ...     make_builder("greeter", lambda p: p.get_service("greeting") + ", world"),
        ... ])
        >>> context.get_service("greeter")
        'Hello, world'
    """

    def __init__(self, builders: list[Builder]):
        builders_by_name: dict[str, list[Builder]] = defaultdict(list)
        for builder in builders:
            builders_by_name[builder.name].append(builder)

        self._builders: dict[str, list[Builder]] = dict(builders_by_name)
        self._built: dict[str, Any] = {}
        self._built_collections: set[str] = set()

        # Names currently under construction, outermost first.
        self._build_stack: list[str] = []

        logger.debug(
            f"Assembled {len(builders)} builders for {len(self._builders)} names"
        )

    def get_service(self, name: str) -> Any:
        """Resolve the single service registered under ``name``.

        Args:
            name: The service name.

        Returns:
            The built service. Shared services are built once and the same object is
            returned on every later call.

        Raises:
            CircularDependencyError: If ``name`` is already being built.
            MissingBuilderError: If no builder is registered for ``name``.
            AmbiguousBuilderError: If more than one builder is registered for ``name``.
            BuildError: If the construction function raised.
            BindingShapeError: If ``name`` was previously resolved as a collection.
        """
        with self._building(name):
            if name in self._built:
                self._check_shape(name, collection=False)
                logger.debug(f"Reusing cached service '{name}'")
                return self._built[name]

            builders = self._builders.get(name)
            if not builders:
                raise MissingBuilderError(name)
            if len(builders) > 1:
                raise AmbiguousBuilderError(name, len(builders))

            builder = builders[0]
            built = self._build(name, builder)

            if builder.options.shared:
                self._built[name] = built
            return built

    def get_services(self, name: str) -> list[Any]:
        """Resolve every service registered under ``name``, in registration order.

        Unlike :meth:`get_service`, a name with no builders is not an error: the
        result is simply empty.

        Args:
            name: The service name.

        Returns:
            A new list holding one built service per registered builder.

        Raises:
            CircularDependencyError: If ``name`` is already being built.
            BuildError: If any construction function raised. No partial result is
                returned or cached.
            BindingShapeError: If ``name`` was previously resolved as a single service.
        """
        with self._building(name):
            if name in self._built:
                self._check_shape(name, collection=True)
                logger.debug(f"Reusing cached services '{name}'")
                return list(self._built[name])

            builders = self._builders.get(name, [])
            built = tuple(self._build(name, builder) for builder in builders)

            if builders and all(builder.options.shared for builder in builders):
                self._built[name] = built
                self._built_collections.add(name)
            return list(built)

    def has_builder(self, name: str) -> bool:
        """Check whether any builder is registered under ``name``."""
        return name in self._builders

    def builder_names(self) -> list[str]:
        """Registered service names, in order of first registration."""
        return list(self._builders)

    @property
    def dependency_path(self) -> tuple[str, ...]:
        """The names currently under construction, outermost first."""
        return tuple(self._build_stack)

    def __contains__(self, name: str) -> bool:
        return self.has_builder(name)

    def __repr__(self) -> str:
        return f"BuildContext(names={len(self._builders)}, built={len(self._built)})"

    @contextmanager
    def _building(self, name: str) -> Iterator[None]:
        """Track ``name`` on the dependency stack for the duration of a lookup.

        Raises:
            CircularDependencyError: If ``name`` is already on the stack.
        """
        if name in self._build_stack:
            raise CircularDependencyError(name, (*self._build_stack, name))

        self._build_stack.append(name)
        try:
            yield
        finally:
            self._build_stack.pop()

    def _build(self, name: str, builder: Builder) -> Any:
        """Run a builder, wrapping failures of the construction function.

        Dependency errors raised by nested lookups pass through untouched so the
        innermost failure reaches the caller.
        """
        try:
            built = builder.build(self)
        except DependencyError:
            raise
        except Exception as e:
            raise BuildError(name) from e

        logger.debug(f"Built '{name}' (shared={builder.options.shared})")
        return built

    def _check_shape(self, name: str, collection: bool):
        cached_as_collection = name in self._built_collections
        if cached_as_collection != collection:
            raise BindingShapeError(name, cached_as_collection)
