"""
Normalization of the callable shapes accepted by ``Container.call``.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .errors import ContainerError
from .introspection import ParameterInfo, SignatureIntrospector
from .keys import locate

if TYPE_CHECKING:
    from .container import Container


class CallableKind(Enum):
    """Shapes a callable can take before normalization."""

    FUNCTION = "function"
    BOUND_METHOD = "bound_method"
    UNBOUND_METHOD = "unbound_method"
    INVOKABLE = "invokable"


@dataclass(frozen=True)
class NormalizedCallable:
    """An invocable target together with its formal parameters."""

    kind: CallableKind
    target: Callable[..., Any]
    parameters: tuple[ParameterInfo, ...]

    def __str__(self) -> str:
        name = getattr(self.target, "__qualname__", repr(self.target))
        return f"{name} ({self.kind.value})"


class CallableNormalizer:
    """
    Reduces callable-like inputs to a NormalizedCallable.

    Accepted inputs:

    - a function, lambda, closure, builtin or ``functools.partial``
    - a bound method
    - a ``(class_or_instance, "method")`` pair; the class may be given by dotted path
    - a class or an object, invoked through ``default_method``
    - a dotted path naming any of the above
    """

    def __init__(self, container: Container):
        self._container = container

    def normalize(self, subject: Any, default_method: str) -> NormalizedCallable:
        """
        Normalize ``subject`` into an invocable target and its parameters.

        Classes named as the receiver of a method are materialized with
        ``Container.make`` once the method is known to exist.

        Raises:
            ContainerError: If the input has no recognised shape, names something
                that does not exist, or cannot be introspected
        """
        if isinstance(subject, str):
            subject = self._locate(subject)

        if isinstance(subject, (tuple, list)):
            return self._normalize_pair(subject)
        if inspect.isfunction(subject) or inspect.isbuiltin(subject) or isinstance(subject, functools.partial):
            return self._describe(CallableKind.FUNCTION, subject)
        if inspect.ismethod(subject):
            return self._describe(CallableKind.BOUND_METHOD, subject)
        if subject is None or inspect.ismodule(subject):
            raise ContainerError(f"Cannot normalize callable [{subject!r}]")
        return self._bind_method(CallableKind.INVOKABLE, subject, default_method)

    def _normalize_pair(self, pair: tuple[Any, ...] | list[Any]) -> NormalizedCallable:
        if len(pair) != 2 or not isinstance(pair[1], str):
            raise ContainerError(f"Cannot normalize callable [{pair!r}]: expected (class_or_instance, method)")

        receiver, method = pair
        if isinstance(receiver, str):
            receiver = self._locate(receiver)
        kind = CallableKind.UNBOUND_METHOD if inspect.isclass(receiver) else CallableKind.BOUND_METHOD
        return self._bind_method(kind, receiver, method)

    def _bind_method(self, kind: CallableKind, receiver: Any, method: str) -> NormalizedCallable:
        if inspect.isclass(receiver):
            if not _defines_method(receiver, method):
                raise ContainerError(f"Cannot call [{receiver.__qualname__}.{method}]: method does not exist")
            receiver = self._container.make(receiver)

        bound = getattr(receiver, method, None)
        if bound is None or not callable(bound):
            raise ContainerError(f"Cannot call [{type(receiver).__qualname__}.{method}]: method does not exist")
        return self._describe(kind, bound)

    @staticmethod
    def _describe(kind: CallableKind, target: Callable[..., Any]) -> NormalizedCallable:
        try:
            parameters = SignatureIntrospector.extract_from_callable(target)
        except (ValueError, TypeError) as e:
            raise ContainerError(f"Cannot call [{target!r}]: signature is not introspectable") from e
        return NormalizedCallable(kind, target, tuple(parameters))

    @staticmethod
    def _locate(name: str) -> Any:
        try:
            return locate(name)
        except LookupError as e:
            raise ContainerError(f"Cannot call [{name}]: no such function or class") from e


def _defines_method(cls: type, method: str) -> bool:
    """Check the class hierarchy, not the metaclass, for ``method``."""
    return any(method in vars(klass) for klass in cls.__mro__)
