"""High level entry points for declaring builders and assembling them."""

from itertools import chain
from typing import Iterable

from lazywire.build_context import BuildContext
from lazywire.domain import Builder, BuilderOptions, BuildFunction
from lazywire.provider import Assembly

__all__ = ["make_builder", "make_builder_with_options", "assemble", "combine_builders"]


def make_builder(name: str, func: BuildFunction) -> Builder:
    """Create a shared :class:`Builder`.

    Example:
        >>> make_builder("database", lambda provider: Database())
    """
    return Builder(name, func, BuilderOptions(shared=True))


def make_builder_with_options(
    name: str, func: BuildFunction, options: BuilderOptions
) -> Builder:
    """Create a :class:`Builder` with explicit options.

    Example:
        >>> make_builder_with_options(
        ...     "request_id", lambda provider: uuid4(), BuilderOptions(shared=False)
        ... )
    """
    return Builder(name, func, options)


def assemble(builders: Iterable[Builder]) -> Assembly:
    """Assemble builders into a queryable :class:`~lazywire.provider.Assembly`.

    Nothing is built until a service is requested. The returned assembly keeps its
    cache of shared services for as long as it is held.

    Args:
        builders: The builders to resolve services from. Builders registered under
            the same name form a multi-binding, kept in the given order.

    Returns:
        An assembly exposing ``get_service``.
    """
    return BuildContext(list(builders))


def combine_builders(*builders: Iterable[Builder]) -> list[Builder]:
    """Concatenate builder lists, preserving order within and across them.

    Example:
        >>> assembly = assemble(combine_builders(persistence_builders, web_builders))
    """
    return list(chain.from_iterable(builders))
