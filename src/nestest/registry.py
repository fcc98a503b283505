#
# src/nestest/registry.py
#
"""
Ordered, append-only registry of test cases and nested groups.
"""

from collections.abc import Awaitable, Callable, Iterator
from typing import TypeAlias

from attrs import define, field, frozen


Action: TypeAlias = Callable[[], None | Awaitable[None]]


@frozen(slots=True)
class Case:
    """A leaf node: a name plus a zero-argument action, sync or async."""
    name: str
    action: Action


@frozen(slots=True)
class Group:
    """A named subgroup holding its own registry of nodes."""
    name: str
    children: "Registry"


Node: TypeAlias = Case | Group


@define(slots=True)
class Registry:
    """
    Ordered sequence of nodes, populated before a run and never mutated during one.

    Names carry no uniqueness constraint; duplicates are told apart only by
    their position in the tree.
    """
    _nodes: list[Node] = field(factory=list, alias="nodes")

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, name: str, entry: "Action | Registry | list[Node]") -> None:
        """Appends a Group when `entry` holds nodes, a Case when it is callable."""
        if isinstance(entry, Registry):
            node: Node = Group(name, entry)
        elif isinstance(entry, list):
            strays = [type(n).__name__ for n in entry if not isinstance(n, (Case, Group))]
            if strays:
                raise TypeError(
                    f"Cannot register group '{name}': every child must be a Case or Group, got {strays}"
                )
            node = Group(name, Registry(entry))
        elif callable(entry):
            node = Case(name, entry)
        else:
            raise TypeError(
                f"Cannot register '{name}': expected a callable or a registry of nodes, "
                f"got {type(entry).__name__}"
            )
        self._nodes.append(node)

    def case(self, name: str) -> Callable[[Action], Action]:
        """Decorator registering the function as a case; the function is returned unchanged."""
        def decorator(action: Action) -> Action:
            self.add(name, action)
            return action
        return decorator

    def group(self, name: str) -> "Registry":
        """Creates a child registry, registers it as a group and returns it."""
        child = Registry()
        self.add(name, child)
        return child


# Process-wide registry used whenever no explicit one is passed.
default_registry = Registry()


def register(name: str, entry: "Action | Registry | list[Node]", registry: Registry | None = None) -> None:
    """Registers `entry` under `name` in `registry`, or the default registry."""
    target = default_registry if registry is None else registry
    target.add(name, entry)


# 🔼⚙️
