"""Exceptions raised while resolving services from an assembly."""

__all__ = [
    "DependencyError",
    "CircularDependencyError",
    "MissingBuilderError",
    "AmbiguousBuilderError",
    "BuildError",
    "BindingShapeError",
]


class DependencyError(Exception):
    """Raised when a service's dependency cannot be resolved or built."""

    pass


class CircularDependencyError(DependencyError):
    """Raised when a service is requested while it is already being built.

    Attributes:
        name: The service name that was re-entered.
        path: The dependency path that led back to ``name``, ending with ``name``.
    """

    def __init__(self, name: str, path: tuple[str, ...]):
        super().__init__(f"Circular dependency detected: {' > '.join(path)}")
        self.name = name
        self.path = path


class MissingBuilderError(DependencyError):
    """Raised when a single service is requested but no builder provides it."""

    def __init__(self, name: str):
        super().__init__(f"No builder registered for '{name}'")
        self.name = name


class AmbiguousBuilderError(DependencyError):
    """Raised when a single service is requested but several builders provide it."""

    def __init__(self, name: str, count: int):
        super().__init__(
            f"Ambiguous: {count} builders registered for '{name}' - "
            "use get_services to resolve all of them"
        )
        self.name = name
        self.count = count


class BuildError(DependencyError):
    """Raised when a builder's construction function fails.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, name: str):
        super().__init__(f"Failed to build '{name}'")
        self.name = name


class BindingShapeError(DependencyError):
    """Raised when a name is requested both as a single service and as a collection."""

    def __init__(self, name: str, cached_as_collection: bool):
        cached, requested = (
            ("a collection", "a single service")
            if cached_as_collection
            else ("a single service", "a collection")
        )
        super().__init__(f"'{name}' was built as {cached} but requested as {requested}")
        self.name = name
