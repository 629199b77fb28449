"""
Runtime dependency container.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from .callables import CallableNormalizer
from .container_base import ContainerInterface
from .errors import CircularReferenceError, ContainerError, EntryNotFoundError
from .introspection import SignatureIntrospector
from .keys import Identifier, identifier_of, is_interface, locate
from .registry import Registry
from .resolver import ParameterResolver, ResolvedArguments

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "__call__"


class Container(ContainerInterface):
    """
    Dependency container with singleton caching and constructor autowiring.

    Entries are registered under string identifiers (or classes, addressed by
    their qualified name) and produced on demand:

    - ``set`` stores a value; a callable value is invoked once with the
      container and its result cached
    - ``factory`` stores a callable invoked on every ``get``
    - ``instance`` stores a ready value
    - ``alias`` and ``interface`` redirect one identifier to another

    Classes that are not registered are built by ``make``, which resolves
    constructor parameters from the container recursively. ``call`` does the
    same for functions and methods.

    Example:
        ```python
        container = Container()
        container.set("dsn", "sqlite://")
        container.factory(Connection, lambda c: Connection(c.get("dsn")))

        service = container.make(UserService)
        result = container.call((UserService, "find"), {"user_id": 7})
        ```
    """

    def __init__(self, *, default_method: str = DEFAULT_METHOD):
        """
        Create an empty container.

        Args:
            default_method: Method invoked by ``call`` when it is given a class or
                an object without an explicit method name
        """
        self._registry = Registry()
        self._parameter_resolver = ParameterResolver(self)
        self._normalizer = CallableNormalizer(self)
        self._default_method = default_method

    @property
    def default_method(self) -> str:
        return self._default_method

    def set(self, identifier: Identifier, value: Any) -> None:
        """
        Register a value under ``identifier``.

        A callable value (other than a class) is treated as a producer: it is
        invoked on the first ``get`` and its result is cached.
        """
        self._registry.set(identifier_of(identifier), value)

    def factory(self, identifier: Identifier, factory: Callable[..., Any]) -> None:
        """Register a producer invoked on every ``get``, whose results are never cached."""
        key = identifier_of(identifier)
        self._registry.set(key, factory)
        self._registry.mark_factory(key)

    def instance(self, identifier: Identifier, value: Any) -> None:
        """Register a ready value, returned as-is by ``get``."""
        self._registry.store_resolved(identifier_of(identifier), value)

    def alias(self, identifier: Identifier, alias: Identifier) -> None:
        """
        Make ``alias`` resolve to the entry registered under ``identifier``.

        Raises:
            EntryNotFoundError: If nothing is registered under ``identifier``
        """
        key = identifier_of(identifier)
        self._assert_has(key)
        self._registry.add_alias(identifier_of(alias), key)

    def interface(self, identifier: Identifier, interface: Identifier) -> None:
        """
        Bind an interface to the entry registered under ``identifier``.

        The interface is keyed by its qualified name, so ``get(Interface)``
        returns the bound entry. A dotted path is also recorded as given.

        Raises:
            ContainerError: If ``interface`` is not an abstract class or Protocol
            EntryNotFoundError: If nothing is registered under ``identifier``
        """
        interface_type = self._interface_type(identifier, interface)
        key = identifier_of(identifier)
        self._assert_has(key)
        self._registry.add_interface(identifier_of(interface_type), key)
        if isinstance(interface, str):
            # Re-exported paths differ from the class's own qualified name
            self._registry.add_interface(interface, key)

    def has(self, identifier: Identifier) -> bool:
        return self._registry.has(identifier_of(identifier))

    def get(self, identifier: Identifier) -> Any:
        """
        Return the entry registered under ``identifier``.

        Aliases and interface bindings are followed. Cached values are returned
        directly; otherwise the binding is realized and, unless it is a factory,
        cached.

        Raises:
            EntryNotFoundError: If nothing is registered under ``identifier``
            CircularReferenceError: If aliases or interface bindings form a cycle
            ContainerError: If the producer bound to the entry fails
        """
        key = self._follow(identifier_of(identifier))

        if self._registry.is_resolved(key):
            return self._registry.resolved(key)

        concrete = self._registry.entry(key)
        if callable(concrete) and not inspect.isclass(concrete):
            concrete = self._produce(key, concrete)

        if not self._registry.is_factory(key):
            self._registry.store_resolved(key, concrete)
        return concrete

    def make(
        self,
        abstract: Identifier,
        params: Mapping[str, Any] | None = None,
        share: bool = True,
    ) -> Any:
        """
        Build an instance of a class, autowiring its constructor.

        Registered entries always win: if ``abstract`` is registered, this is
        ``get(abstract)``. A dotted path and the qualified name of the class it
        locates share one instance.

        Args:
            abstract: A class, or the dotted path of one
            params: Explicit constructor arguments keyed by parameter name; also
                offered to dependencies constructed along the way
            share: Cache the instance so later ``get``/``make`` calls return it

        Returns:
            The instance

        Raises:
            ContainerError: If the class cannot be found or instantiated
        """
        try:
            key = identifier_of(abstract)
        except TypeError as e:
            raise ContainerError(f"Cannot resolve [{abstract!r}]: {e}") from e
        if self.has(key):
            return self.get(key)

        if inspect.isclass(abstract):
            cls = abstract
        else:
            cls = self._reflect(key)
            canonical = identifier_of(cls)
            if canonical != key and self.has(canonical):
                return self.get(canonical)
        instance = self._instantiate(cls, params)

        if share:
            self._registry.store_resolved(key, instance)
            self._registry.store_resolved(identifier_of(cls), instance)
        return instance

    def call(
        self,
        target: Any,
        params: Mapping[str, Any] | None = None,
        default_method: str | None = None,
    ) -> Any:
        """
        Invoke a callable, resolving its parameters from the container.

        Args:
            target: A function, bound method, ``(class_or_instance, "method")``
                pair, class, object, or the dotted path of a function or class
            params: Explicit arguments keyed by parameter name
            default_method: Method used for classes and objects given without one;
                defaults to the container's ``default_method``

        Returns:
            Whatever the target returns

        Raises:
            ContainerError: If the target cannot be normalized or its parameters
                cannot be resolved
        """
        normalized = self._normalizer.normalize(target, default_method or self._default_method)
        arguments = self._parameter_resolver.resolve_parameters(
            normalized.parameters, params, owner=normalized.target
        )
        logger.debug("Calling %s", normalized)
        return normalized.target(*arguments.args, **arguments.kwargs)

    def is_resolved(self, identifier: Identifier) -> bool:
        """Check whether a cached value exists for ``identifier``."""
        key = identifier_of(identifier)
        if not self._registry.has(key):
            return False
        return self._registry.is_resolved(self._follow(key))

    def get_instance_count(self) -> int:
        """Get the number of cached values."""
        return self._registry.resolved_count()

    def _assert_has(self, identifier: str) -> None:
        if not self._registry.has(identifier):
            raise EntryNotFoundError(identifier)

    def _follow(self, identifier: str) -> str:
        """Follow aliases and interface bindings to the identifier holding the entry."""
        self._assert_has(identifier)
        chain = [identifier]
        target = self._registry.redirect(identifier)
        while target is not None:
            if target in chain:
                raise CircularReferenceError([*chain, target])
            logger.debug("Following %s -> %s", chain[-1], target)
            self._assert_has(target)
            chain.append(target)
            target = self._registry.redirect(target)
        return chain[-1]

    def _produce(self, identifier: str, producer: Callable[..., Any]) -> Any:
        logger.debug("Invoking producer for %s", identifier)
        try:
            if _accepts_container(producer):
                return producer(self)
            return producer()
        except ContainerError:
            raise
        except Exception as e:
            raise ContainerError(f"Cannot resolve entry [{identifier}]: {e}") from e

    def _interface_type(self, identifier: Identifier, interface: Identifier) -> type:
        name = interface if isinstance(interface, str) else getattr(interface, "__qualname__", repr(interface))
        message = f"The interface bind name must be a real interface, in [{identifier_of(identifier)} => {name}]"

        candidate: Any = interface
        if isinstance(interface, str):
            try:
                candidate = locate(interface)
            except LookupError as e:
                raise ContainerError(message) from e
        if not is_interface(candidate):
            raise ContainerError(message)
        return candidate

    def _reflect(self, name: str) -> type:
        try:
            cls = locate(name)
        except LookupError as e:
            raise ContainerError(f"Cannot resolve [{name}]: {e}") from e
        if not inspect.isclass(cls):
            raise ContainerError(f"Cannot resolve [{name}]: not a class")
        return cls

    def _instantiate(self, cls: type, params: Mapping[str, Any] | None) -> Any:
        try:
            parameters = SignatureIntrospector.extract_from_class(cls)
        except (ValueError, TypeError):
            parameters = []

        if not any(parameter.is_required for parameter in parameters):
            logger.debug("Instantiating %s without arguments", cls.__qualname__)
            return self._construct(cls, ResolvedArguments())

        logger.debug("Autowiring %s", cls.__qualname__)
        arguments = self._parameter_resolver.resolve_parameters(parameters, params, owner=cls)
        return self._construct(cls, arguments)

    @staticmethod
    def _construct(cls: type, arguments: ResolvedArguments) -> Any:
        try:
            return cls(*arguments.args, **arguments.kwargs)
        except ContainerError:
            raise
        except Exception as e:
            raise ContainerError(f"Cannot instantiate [{identifier_of(cls)}]: {e}") from e


def _accepts_container(producer: Callable[..., Any]) -> bool:
    """Check whether a producer can take the container as its single argument."""
    try:
        signature = inspect.signature(producer)
    except (ValueError, TypeError):
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True
