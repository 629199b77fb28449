"""
Re-exports stub classes under a second dotted path.
"""

from stubs import ClassInjectableStub, ServiceStub, StubInterface

__all__ = ["ClassInjectableStub", "ServiceStub", "StubInterface"]
