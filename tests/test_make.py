#!/usr/bin/env python3
"""
Unit tests for autowired construction with Container.make().
"""

import unittest
from collections import OrderedDict

from stubs import (
    AbstractDependencyStub,
    ClassInjectableStub,
    ConfigStub,
    CounterStub,
    FailingConstructorStub,
    FlagStub,
    InterfaceStub,
    KeywordOnlyStub,
    NestedDependencyStub,
    ServiceStub,
    SimpleConstructorStub,
    StubInterface,
    WrapperStub,
)
from stubs_deferred import MixedAnnotationsStub

from switchboard import Container, ContainerError, identifier_of


class TestMake(unittest.TestCase):
    """Test class construction and constructor autowiring."""

    def setUp(self):
        self.container = Container()

    def test_make_without_constructor(self):
        """Test that classes without constructor parameters are instantiated directly."""
        instance = self.container.make(ServiceStub)
        self.assertIsInstance(instance, ServiceStub)

    def test_make_with_explicit_params(self):
        """Test explicit parameters with a defaulted scalar."""
        instance = self.container.make(SimpleConstructorStub, {"a": 1, "b": 2})

        self.assertEqual((instance.a, instance.b, instance.c), (1, 2, 3))

    def test_make_full_runtime_resolving(self):
        """Test that unregistered class dependencies are auto-constructed."""
        instance = self.container.make(ClassInjectableStub)

        self.assertIsInstance(instance.service, ServiceStub)
        self.assertIsNone(instance.x)
        # The dependency is shared once constructed
        self.assertIs(self.container.get(ServiceStub), instance.service)

    def test_make_uses_registered_dependency(self):
        """Test that registered dependencies win over auto-construction."""
        self.container.set(ServiceStub, lambda: ServiceStub())

        instance = self.container.make(ClassInjectableStub)

        self.assertIs(instance.service, self.container.get(ServiceStub))

    def test_make_recursive_dependencies(self):
        """Test auto-construction through several levels."""
        instance = self.container.make(NestedDependencyStub)

        self.assertIsInstance(instance.injectable, ClassInjectableStub)
        self.assertIsInstance(instance.injectable.service, ServiceStub)
        self.assertEqual(instance.label, "nested")

    def test_make_passes_params_to_dependencies(self):
        """Test that explicit parameters are offered to nested constructors."""
        instance = self.container.make(WrapperStub, {"a": 1, "b": 2})

        self.assertEqual((instance.inner.a, instance.inner.b, instance.inner.c), (1, 2, 3))

    def test_make_keyword_only_parameters(self):
        """Test that keyword-only parameters are resolved and passed by name."""
        instance = self.container.make(KeywordOnlyStub, {"retries": 5})

        self.assertEqual(instance.retries, 5)
        self.assertIsInstance(instance.service, ServiceStub)

    def test_make_honours_falsy_params(self):
        """Test that falsy explicit values are not replaced by defaults."""
        instance = self.container.make(FlagStub, {"count": 0, "enabled": False, "tags": []})

        self.assertEqual(instance.count, 0)
        self.assertIs(instance.enabled, False)
        self.assertEqual(instance.tags, [])

    def test_make_dataclass(self):
        """Test construction of a dataclass."""
        config = self.container.make(ConfigStub, {"dsn": "sqlite://"})

        self.assertEqual(config, ConfigStub("sqlite://", 1.0))

    def test_make_shares_by_default(self):
        """Test that made instances are cached."""
        first = self.container.make(CounterStub)

        self.assertIs(self.container.make(CounterStub), first)
        self.assertIs(self.container.get(CounterStub), first)

    def test_make_without_sharing(self):
        """Test that share=False produces a new instance every time."""
        first = self.container.make(CounterStub, share=False)
        second = self.container.make(CounterStub, share=False)

        self.assertIsNot(first, second)
        self.assertFalse(self.container.has(CounterStub))

    def test_make_prefers_registered_entry(self):
        """Test that make() returns a registered entry instead of constructing."""
        service = ServiceStub()
        self.container.instance(ServiceStub, service)

        self.assertIs(self.container.make(ServiceStub), service)

    def test_make_bound_interface(self):
        """Test that make() follows interface bindings."""
        self.container.set("impl", lambda: InterfaceStub())
        self.container.interface("impl", StubInterface)

        instance = self.container.make(AbstractDependencyStub)

        self.assertIs(instance.dependency, self.container.get("impl"))

    def test_make_by_dotted_name(self):
        """Test that classes can be named by dotted path."""
        name = identifier_of(ServiceStub)

        instance = self.container.make(name)

        self.assertIsInstance(instance, ServiceStub)
        self.assertIs(self.container.get(ServiceStub), instance)

    def test_make_stdlib_class_by_dotted_name(self):
        """Test construction of a class from another module."""
        self.assertIsInstance(self.container.make("collections.OrderedDict"), OrderedDict)

    def test_make_invalid_class(self):
        """Test that unknown names raise ContainerError."""
        with self.assertRaises(ContainerError):
            self.container.make("not-a-real-type")

        with self.assertRaises(ContainerError) as context:
            self.container.make("no_such_module_for_tests.Thing")
        self.assertIsInstance(context.exception.__cause__, LookupError)

    def test_make_reexported_name_shares_instance(self):
        """Test that a re-exported path and the class itself share one instance."""
        by_name = self.container.make("stubs_reexport.ServiceStub")

        self.assertIs(self.container.make(ServiceStub), by_name)
        self.assertIs(self.container.make(ClassInjectableStub).service, by_name)

    def test_make_reexported_name_after_class(self):
        """Test that a re-exported path finds an instance shared under the class name."""
        instance = self.container.make(ServiceStub)

        self.assertIs(self.container.make("stubs_reexport.ServiceStub"), instance)

    def test_make_invalid_identifier(self):
        """Test that identifiers other than strings and classes raise ContainerError."""
        with self.assertRaises(ContainerError) as context:
            self.container.make(42)

        self.assertIsInstance(context.exception.__cause__, TypeError)

    def test_make_with_unresolvable_annotation(self):
        """Test that one unresolvable string annotation does not hide the others."""
        instance = self.container.make(MixedAnnotationsStub)

        self.assertIsInstance(instance.service, ServiceStub)
        self.assertIsNone(instance.cache)

    def test_make_non_class(self):
        """Test that dotted paths to non-classes are rejected."""
        with self.assertRaises(ContainerError):
            self.container.make("os.path.join")

    def test_make_unbound_abstract_dependency(self):
        """Test that an abstract dependency without a binding fails."""
        with self.assertRaises(ContainerError) as context:
            self.container.make(AbstractDependencyStub)

        self.assertIsInstance(context.exception.__cause__, TypeError)

    def test_make_constructor_failure(self):
        """Test that constructor exceptions are wrapped."""
        with self.assertRaises(ContainerError) as context:
            self.container.make(FailingConstructorStub)

        self.assertIsInstance(context.exception.__cause__, RuntimeError)
        self.assertFalse(self.container.has(FailingConstructorStub))


if __name__ == "__main__":
    unittest.main()
