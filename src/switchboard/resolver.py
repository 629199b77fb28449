"""
Parameter resolution for constructors and callables.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .introspection import ParameterInfo
from .logger_injection import AutoLoggerManager

if TYPE_CHECKING:
    from .container import Container

logger = logging.getLogger(__name__)


@dataclass
class ResolvedArguments:
    """Arguments ready to be passed to a constructor or callable."""

    args: list[Any] = field(default_factory=list)
    kwargs: dict[str, Any] = field(default_factory=dict)


class ParameterResolver:
    """
    Resolves formal parameters to concrete values using a container.

    Each parameter is resolved independently, trying in order:

    1. an explicit override passed by the caller under the parameter name
    2. a container entry registered under the parameter name
    3. a container entry registered under the declared class
    4. the default value of a built-in, non-class or untyped parameter
    5. auto-construction of the declared class (or an injected logger)
    6. the default value
    7. None
    """

    def __init__(self, container: Container):
        self._container = container

    def resolve_parameters(
        self,
        parameters: Iterable[ParameterInfo],
        params: Mapping[str, Any] | None = None,
        owner: Any = None,
    ) -> ResolvedArguments:
        """
        Resolve an ordered list of parameters.

        Args:
            parameters: Descriptors of the formal parameters
            params: Explicit overrides keyed by parameter name
            owner: The class or function the parameters belong to

        Returns:
            Positional arguments and keyword-only arguments, in declaration order
        """
        overrides = params or {}
        resolved = ResolvedArguments()
        for parameter in parameters:
            if parameter.is_variadic:
                continue
            value = self.resolve_parameter(parameter, overrides, owner)
            if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
                resolved.kwargs[parameter.name] = value
            else:
                resolved.args.append(value)
        return resolved

    def resolve_parameter(
        self,
        parameter: ParameterInfo,
        params: Mapping[str, Any] | None = None,
        owner: Any = None,
    ) -> Any:
        """Resolve a single parameter."""
        overrides = params or {}
        found, value = self._lookup(parameter, overrides)
        if found:
            return value

        declared = parameter.injectable_type
        if declared is not None:
            if AutoLoggerManager.should_auto_inject_logger(declared):
                return AutoLoggerManager.logger_for(owner)
            logger.debug("Auto-constructing %s for parameter %r", declared.__qualname__, parameter.name)
            return self._container.make(declared, overrides, share=True)

        if parameter.has_default:
            return parameter.default_value
        return None

    def _lookup(self, parameter: ParameterInfo, overrides: Mapping[str, Any]) -> tuple[bool, Any]:
        """Try the override, name, type and scalar-default strategies."""
        name = parameter.name
        if name in overrides:
            return True, overrides[name]
        if self._container.has(name):
            return True, self._container.get(name)

        declared = parameter.injectable_type
        if declared is not None:
            if self._container.has(declared):
                return True, self._container.get(declared)
        elif parameter.has_default:
            return True, parameter.default_value

        return False, None
