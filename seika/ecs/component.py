"""Component type registration and per-entity component storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MAX_COMPONENTS = 32
COMPONENT_TYPE_NONE = 0
INVALID_NAME = "INVALID"


@dataclass(frozen=True)
class ComponentTypeInfo:
    """A registered component type: its name, bit flag and index."""

    name: str
    type: int
    index: int


class ComponentRegistry:
    """Assigns each component name a unique index and bit flag."""

    def __init__(self) -> None:
        self._by_name: dict[str, ComponentTypeInfo] = {}

    def register(self, name: str) -> ComponentTypeInfo:
        """Register ``name`` (or return its existing info)."""
        existing = self._by_name.get(name)
        if existing is not None:
            return existing
        index = len(self._by_name)
        if index + 1 >= MAX_COMPONENTS:
            raise OverflowError(
                f"Over the maximum allowed components which are '{MAX_COMPONENTS}'"
            )
        info = ComponentTypeInfo(name=name, type=1 << index, index=index)
        self._by_name[name] = info
        return info

    def get_type_info(self, name: str) -> ComponentTypeInfo:
        """Return the info for ``name``; raise KeyError when unregistered."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"Component type '{name}' is not registered") from None

    def find_type_info(self, name: str) -> ComponentTypeInfo | None:
        return self._by_name.get(name)

    def get_type_flag(self, name: str) -> int:
        return self.get_type_info(name).type

    def _by_index(self, index: int) -> ComponentTypeInfo | None:
        return next((info for info in self._by_name.values() if info.index == index), None)

    def type_for_index(self, index: int) -> int:
        """Return the flag for ``index``, or ``COMPONENT_TYPE_NONE``."""
        info = self._by_index(index)
        return COMPONENT_TYPE_NONE if info is None else info.type

    def name_for_index(self, index: int) -> str:
        """Return the name for ``index``, or ``"INVALID"``."""
        info = self._by_index(index)
        return INVALID_NAME if info is None else info.name

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


@dataclass
class _ComponentArray:
    components: list[Any] = field(default_factory=lambda: [None] * MAX_COMPONENTS)
    signature: int = COMPONENT_TYPE_NONE


class ComponentManager:
    """Stores the components of every entity, indexed by component index."""

    def __init__(self, registry: ComponentRegistry) -> None:
        self.registry = registry
        self._arrays: list[_ComponentArray] = []

    def _array(self, entity: int) -> _ComponentArray:
        if not 0 <= entity < len(self._arrays):
            raise IndexError(f"Attempting to access out of bounds entity '{entity}'")
        return self._arrays[entity]

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < MAX_COMPONENTS:
            raise IndexError(f"component index '{index}' is out of range")

    def get_component(self, entity: int, index: int) -> Any:
        """Return the component; raise KeyError when the entity lacks it."""
        component = self.get_component_unchecked(entity, index)
        if component is None:
            raise KeyError(
                f"Entity '{entity}' doesn't have '{self.registry.name_for_index(index)}' component!"
            )
        return component

    def get_component_unchecked(self, entity: int, index: int) -> Any:
        """Return the component or None when the entity lacks it."""
        self._check_index(index)
        return self._array(entity).components[index]

    def set_component(self, entity: int, index: int, component: Any) -> None:
        """Attach ``component`` to ``entity`` and add its flag to the signature."""
        self._check_index(index)
        self.reserve(entity)
        array = self._arrays[entity]
        array.components[index] = component
        array.signature |= self.registry.type_for_index(index)

    def remove_component(self, entity: int, index: int) -> None:
        """Detach the component at ``index`` and clear its flag."""
        self._check_index(index)
        array = self._array(entity)
        array.signature &= ~self.registry.type_for_index(index)
        array.components[index] = None

    def remove_all_components(self, entity: int) -> None:
        array = self._array(entity)
        array.components = [None] * MAX_COMPONENTS
        array.signature = COMPONENT_TYPE_NONE

    def has_component(self, entity: int, index: int) -> bool:
        return self.get_component_unchecked(entity, index) is not None

    def set_signature(self, entity: int, signature: int) -> None:
        self._array(entity).signature = signature

    def get_signature(self, entity: int) -> int:
        return self._array(entity).signature

    def reserve(self, last_entity: int) -> None:
        """Make room for entities up to and including ``last_entity``."""
        if last_entity < 0:
            raise ValueError("entity must not be negative")
        while len(self._arrays) <= last_entity:
            self._arrays.append(_ComponentArray())