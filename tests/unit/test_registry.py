#
# tests/unit/test_registry.py
#
"""Unit tests for the Registry and registration helpers."""

import pytest

from nestest.registry import Case, Group, Registry, register


def _noop() -> None:
    pass


class TestRegistryAdd:
    def test_callable_becomes_case(self, registry: Registry) -> None:
        registry.add("one", _noop)

        (node,) = list(registry)
        assert isinstance(node, Case)
        assert node.name == "one"
        assert node.action is _noop

    def test_registry_becomes_group_by_reference(self, registry: Registry) -> None:
        child = Registry()
        registry.add("group", child)
        # Cases added to the child afterwards still belong to the group.
        child.add("late", _noop)

        (node,) = list(registry)
        assert isinstance(node, Group)
        assert node.children is child
        assert [n.name for n in node.children] == ["late"]

    def test_list_of_nodes_becomes_group(self, registry: Registry) -> None:
        registry.add("group", [Case("a", _noop), Case("b", _noop)])

        (node,) = list(registry)
        assert isinstance(node, Group)
        assert [n.name for n in node.children] == ["a", "b"]

    def test_preserves_order_and_allows_duplicate_and_empty_names(self, registry: Registry) -> None:
        registry.add("same", _noop)
        registry.add("", _noop)
        registry.add("same", _noop)

        assert [n.name for n in registry] == ["same", "", "same"]
        assert len(registry) == 3

    def test_rejects_non_callable_entry(self, registry: Registry) -> None:
        with pytest.raises(TypeError, match="Cannot register 'bad'"):
            registry.add("bad", "not a test")  # type: ignore[arg-type]
        assert len(registry) == 0

    def test_rejects_list_with_non_node_children(self, registry: Registry) -> None:
        with pytest.raises(TypeError, match=r"every child must be a Case or Group, got \['function'\]"):
            registry.add("group", [Case("a", _noop), _noop])  # type: ignore[list-item]
        assert len(registry) == 0

    def test_nodes_are_immutable(self, registry: Registry) -> None:
        registry.add("one", _noop)
        node = next(iter(registry))
        with pytest.raises(AttributeError):
            node.name = "other"  # type: ignore[misc]


class TestRegistryHelpers:
    def test_case_decorator_registers_and_returns_function(self, registry: Registry) -> None:
        @registry.case("decorated")
        def check() -> None:
            pass

        assert check.__name__ == "check"
        (node,) = list(registry)
        assert node.name == "decorated"
        assert node.action is check

    def test_group_helper_returns_registered_child(self, registry: Registry) -> None:
        child = registry.group("outer")
        child.add("inner", _noop)

        (node,) = list(registry)
        assert isinstance(node, Group)
        assert node.children is child


class TestRegister:
    def test_defaults_to_process_wide_registry(self, isolated_default_registry: Registry) -> None:
        register("global", _noop)
        register("other", _noop)

        assert [n.name for n in isolated_default_registry] == ["global", "other"]

    def test_explicit_registry_is_isolated(
        self, isolated_default_registry: Registry, registry: Registry
    ) -> None:
        register("local", _noop, registry)

        assert len(registry) == 1
        assert len(isolated_default_registry) == 0
