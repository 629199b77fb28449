"""
Switchboard - a runtime dependency container with constructor autowiring.

This library provides:
- String-keyed entries: values, factories, instances, aliases and interface bindings
- Singleton caching of everything that is not a factory
- Autowiring of unregistered classes from their constructor signatures
- Invocation of functions and methods with parameters resolved from the container
"""

from .callables import CallableKind, CallableNormalizer, NormalizedCallable
from .container import DEFAULT_METHOD, Container
from .container_base import ContainerInterface
from .errors import CircularReferenceError, ContainerError, EntryNotFoundError
from .introspection import ParameterInfo, SignatureIntrospector
from .keys import Identifier, identifier_of
from .logger_injection import AutoLoggerManager
from .registry import Registry
from .resolver import ParameterResolver, ResolvedArguments

__all__ = [
    "AutoLoggerManager",
    "CallableKind",
    "CallableNormalizer",
    "CircularReferenceError",
    "Container",
    "ContainerError",
    "ContainerInterface",
    "DEFAULT_METHOD",
    "EntryNotFoundError",
    "Identifier",
    "NormalizedCallable",
    "ParameterInfo",
    "ParameterResolver",
    "Registry",
    "ResolvedArguments",
    "SignatureIntrospector",
    "identifier_of",
]
