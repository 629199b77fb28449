"""
Automatic logger injection.

A parameter declared as ``logging.Logger`` that the container cannot resolve
otherwise receives a logger named after the class or function that asked
for it.
"""

from __future__ import annotations

import logging
from typing import Any


class AutoLoggerManager:
    """Decides when a logger is injected and which logger it is."""

    @staticmethod
    def should_auto_inject_logger(type_hint: Any) -> bool:
        """Check whether a declared parameter type asks for a logger."""
        return type_hint is logging.Logger

    @staticmethod
    def logger_name_for(owner: Any) -> str:
        """
        Name a logger after its owner.

        Args:
            owner: The class or function whose signature requests the logger

        Returns:
            ``"<module>.<qualname>"`` of the owner, or ``"__unknown__"``
        """
        module = getattr(owner, "__module__", None)
        qualname = getattr(owner, "__qualname__", None)
        if module and qualname:
            return f"{module}.{qualname}"
        return qualname or module or "__unknown__"

    @staticmethod
    def logger_for(owner: Any) -> logging.Logger:
        return logging.getLogger(AutoLoggerManager.logger_name_for(owner))
