"""Lazywire dependency injection container.

Lazywire wires services together from named builders. A builder is a construction
function paired with a name; the function receives a provider through which it
requests its own dependencies by name. Builders are assembled once into an
assembly, which resolves services lazily on request, caching shared instances and
reporting dependency cycles with the full path that caused them.

Key Features:
    - Explicit, name-keyed registration with no reflection or auto-wiring
    - Lazy, recursive resolution of only the requested dependency subgraph
    - Shared (cached) and per-request builders
    - Multi-bindings: several builders under one name, resolved as a list
    - Cycle detection with a readable dependency path

Basic Usage:
    >>> from lazywire.builders import assemble, make_builder
    >>>
    >>> assembly = assemble([
    ...     make_builder("settings", lambda provider: {"dsn": "sqlite://"}),
    ...     make_builder(
    ...         "database",
    ...         lambda provider: Database(provider.get_service("settings")["dsn"]),
    ...     ),
    ... ])
    >>> db = assembly.get_service("database")

The framework consists of several core modules:
    - builders: High-level builder and assembly construction functions
    - build_context: The resolution engine
    - registry: Decorator-based builder collection
    - provider: Provider and Assembly interfaces
    - domain: Core domain models (Builder, BuilderOptions)
    - errors: Framework-specific exceptions
"""
