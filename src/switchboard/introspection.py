"""
Signature introspection for constructors, functions and methods.
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints


@dataclass(frozen=True)
class ParameterInfo:
    """A formal parameter of a constructor or callable, as seen by the resolver."""

    name: str
    type_hint: Any
    kind: inspect._ParameterKind
    default_value: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default_value is not inspect.Parameter.empty

    @property
    def injectable_type(self) -> type | None:
        """The declared class if it can be looked up or auto-constructed, else None."""
        hint = self.type_hint
        if hint is None or hint is Any or get_origin(hint) is not None:
            return None
        if not inspect.isclass(hint):
            return None
        if hint.__module__ == "builtins":
            return None
        return hint

    @property
    def is_required(self) -> bool:
        return not self.has_default and not self.is_variadic

    @property
    def is_variadic(self) -> bool:
        return self.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def unwrap_type_hint(hint: Any) -> Any:
    """
    Reduce a type hint to the type used for resolution.

    ``Annotated[X, ...]`` becomes ``X`` and ``X | None`` becomes ``X``. Missing
    annotations and unresolved string forward references become None.
    """
    if hint is inspect.Parameter.empty or isinstance(hint, str):
        return None

    origin = get_origin(hint)
    if origin is Annotated:
        return unwrap_type_hint(get_args(hint)[0])
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return unwrap_type_hint(members[0])
    return hint


class SignatureIntrospector:
    """Extracts ParameterInfo descriptors from callables and classes."""

    @staticmethod
    def extract_from_callable(func: Callable[..., Any]) -> list[ParameterInfo]:
        """
        Describe the parameters of a function or bound method.

        Args:
            func: The callable to inspect

        Returns:
            One descriptor per formal parameter, in declaration order

        Raises:
            ValueError, TypeError: If the callable has no introspectable signature
        """
        signature = inspect.signature(func)
        hints = SignatureIntrospector._type_hints(func)
        return SignatureIntrospector._describe(signature, hints)

    @staticmethod
    def extract_from_class(cls: type) -> list[ParameterInfo]:
        """
        Describe the constructor parameters of a class.

        Raises:
            ValueError, TypeError: If the constructor has no introspectable signature
        """
        signature = inspect.signature(cls)
        init = cls.__init__
        hints = SignatureIntrospector._type_hints(init) if init is not object.__init__ else {}
        return SignatureIntrospector._describe(signature, hints)

    @staticmethod
    def _describe(signature: inspect.Signature, hints: dict[str, Any]) -> list[ParameterInfo]:
        return [
            ParameterInfo(
                name=name,
                type_hint=unwrap_type_hint(hints.get(name, parameter.annotation)),
                kind=parameter.kind,
                default_value=parameter.default,
            )
            for name, parameter in signature.parameters.items()
        ]

    @staticmethod
    def _type_hints(func: Any) -> dict[str, Any]:
        try:
            return get_type_hints(func)
        except (NameError, TypeError, AttributeError):
            pass

        # Evaluate annotations one at a time; unresolvable ones stay strings
        target = inspect.unwrap(getattr(func, "__func__", func))
        annotations = getattr(target, "__annotations__", None) or {}
        globalns = getattr(target, "__globals__", {})
        return {name: _evaluate(annotation, globalns) for name, annotation in annotations.items()}


def _evaluate(annotation: Any, globalns: dict[str, Any]) -> Any:
    """Evaluate a string annotation, leaving it as a string when it cannot be resolved."""
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns)
    except Exception:
        return annotation
