"""Entity component systems and the manager that dispatches their hooks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterator, Optional

from seika.ecs.component import (
    COMPONENT_TYPE_NONE,
    MAX_COMPONENTS,
    ComponentManager,
    ComponentRegistry,
)

MAX_ENTITY_SYSTEMS_PER_HOOK = 12
MAX_SYSTEMS = MAX_COMPONENTS

logger = logging.getLogger(__name__)

SystemCallback = Callable[["ECSSystem"], None]
EntityCallback = Callable[["ECSSystem", int], None]
UpdateCallback = Callable[["ECSSystem", float], None]
MessageCallback = Callable[["ECSSystem", str], None]


@dataclass
class SystemTemplate:
    """A name and the callbacks a system created from it receives."""

    name: str = "example template system"
    on_ec_system_register: Optional[SystemCallback] = None
    on_ec_system_destroy: Optional[SystemCallback] = None
    on_entity_registered_func: Optional[EntityCallback] = None
    on_entity_start_func: Optional[EntityCallback] = None
    on_entity_end_func: Optional[EntityCallback] = None
    on_entity_unregistered_func: Optional[EntityCallback] = None
    on_entity_entered_scene_func: Optional[EntityCallback] = None
    render_func: Optional[SystemCallback] = None
    pre_update_all_func: Optional[SystemCallback] = None
    post_update_all_func: Optional[SystemCallback] = None
    update_func: Optional[UpdateCallback] = None
    fixed_update_func: Optional[UpdateCallback] = None
    network_callback_func: Optional[MessageCallback] = None


_CALLBACK_NAMES = tuple(f.name for f in fields(SystemTemplate) if f.name != "name")

# Hooks the manager keeps a dispatch list for, in the order they are checked.
_HOOKS = (
    "on_entity_start_func",
    "on_entity_end_func",
    "on_entity_entered_scene_func",
    "render_func",
    "pre_update_all_func",
    "post_update_all_func",
    "update_func",
    "fixed_update_func",
    "network_callback_func",
)


def parse_signature(registry: ComponentRegistry, signatures: str) -> int:
    """Combine the flags of comma separated component names; spaces are ignored.

    Raises KeyError for a name that is not registered.
    """
    signature = COMPONENT_TYPE_NONE
    for part in signatures.split(","):
        name = part.replace(" ", "")
        info = registry.find_type_info(name)
        if info is None:
            raise KeyError(f"Unable to get type info for '{name}'")
        signature |= info.type
    return signature


class ECSSystem:
    """A system: callbacks, a component signature and the entities matching it."""

    def __init__(
        self,
        name: str,
        template: SystemTemplate | None = None,
        signature: int = COMPONENT_TYPE_NONE,
    ) -> None:
        self.name = name
        self.component_signature = signature
        self.entities: list[int] = []
        for callback_name in _CALLBACK_NAMES:
            value = getattr(template, callback_name) if template is not None else None
            setattr(self, callback_name, value)

    def has_entity(self, entity: int) -> bool:
        return entity in self.entities

    def matches(self, entity_signature: int) -> bool:
        """Return True if ``entity_signature`` holds every flag of this system."""
        return entity_signature & self.component_signature == self.component_signature

    def __repr__(self) -> str:
        return f"ECSSystem({self.name!r}, signature={self.component_signature}, entities={self.entities!r})"


class SystemManager:
    """Registers systems and forwards entity and frame events to them."""

    def __init__(self, component_manager: ComponentManager) -> None:
        self.component_manager = component_manager
        self._systems: list[ECSSystem] = []
        self._hooks: dict[str, list[ECSSystem]] = {hook: [] for hook in _HOOKS}

    @property
    def systems(self) -> list[ECSSystem]:
        return list(self._systems)

    def create_system(
        self,
        name: str | None = None,
        signatures: str | None = None,
        template: SystemTemplate | None = None,
    ) -> ECSSystem:
        """Create a system, taking its signature from comma separated component names."""
        if name is None:
            if template is None:
                raise ValueError("a system needs a name or a template")
            name = template.name
        signature = (
            parse_signature(self.component_manager.registry, signatures)
            if signatures
            else COMPONENT_TYPE_NONE
        )
        return ECSSystem(name, template, signature)

    def register(self, system: ECSSystem) -> None:
        """Add ``system`` and enrol it for every hook it has a callback for."""
        if system is None:
            raise TypeError("Passed in system is None!")
        if len(self._systems) + 1 >= MAX_SYSTEMS:
            raise OverflowError(f"At system limit of '{MAX_SYSTEMS}'")
        for hook in _HOOKS:
            if getattr(system, hook) is not None and len(self._hooks[hook]) + 1 >= MAX_ENTITY_SYSTEMS_PER_HOOK:
                raise OverflowError(
                    f"At system '{hook}' limit of '{MAX_ENTITY_SYSTEMS_PER_HOOK}'"
                )
        self._systems.append(system)
        if system.on_ec_system_register is not None:
            system.on_ec_system_register(system)
        for hook in _HOOKS:
            if getattr(system, hook) is not None:
                self._hooks[hook].append(system)

    def update_entity_signature_with_systems(self, entity: int) -> None:
        """Add ``entity`` to systems it matches and drop it from the others."""
        signature = self.component_manager.get_signature(entity)
        for system in self._systems:
            if system.matches(signature):
                self._insert(entity, system)
            else:
                self._remove(entity, system)

    def remove_entity_from_all_systems(self, entity: int) -> None:
        for system in self._systems:
            self._remove(entity, system)

    def _matching(self, hook: str, entity: int) -> Iterator[ECSSystem]:
        signature = self.component_manager.get_signature(entity)
        return (s for s in list(self._hooks[hook]) if s.matches(signature))

    def entity_start(self, entity: int) -> None:
        for system in self._matching("on_entity_start_func", entity):
            system.on_entity_start_func(system, entity)

    def entity_end(self, entity: int) -> None:
        for system in self._matching("on_entity_end_func", entity):
            system.on_entity_end_func(system, entity)

    def entity_entered_scene(self, entity: int) -> None:
        for system in self._matching("on_entity_entered_scene_func", entity):
            system.on_entity_entered_scene_func(system, entity)

    def render(self) -> None:
        for system in list(self._hooks["render_func"]):
            system.render_func(system)

    def pre_update_all(self) -> None:
        for system in list(self._hooks["pre_update_all_func"]):
            system.pre_update_all_func(system)

    def post_update_all(self) -> None:
        for system in list(self._hooks["post_update_all_func"]):
            system.post_update_all_func(system)

    def update(self, delta_time: float) -> None:
        for system in list(self._hooks["update_func"]):
            system.update_func(system, delta_time)

    def fixed_update(self, delta_time: float) -> None:
        for system in list(self._hooks["fixed_update_func"]):
            system.fixed_update_func(system, delta_time)

    def network_callback(self, message: str) -> None:
        for system in list(self._hooks["network_callback_func"]):
            system.network_callback_func(system, message)

    def finalize(self) -> None:
        """Destroy every registered system and forget them."""
        systems, self._systems = self._systems, []
        for hook_list in self._hooks.values():
            hook_list.clear()
        for system in systems:
            if system.on_ec_system_destroy is not None:
                system.on_ec_system_destroy(system)

    @staticmethod
    def _insert(entity: int, system: ECSSystem) -> None:
        if system.has_entity(entity):
            logger.debug("Entity '%d' already in system '%s'", entity, system.name)
            return
        system.entities.append(entity)
        if system.on_entity_registered_func is not None:
            system.on_entity_registered_func(system, entity)

    @staticmethod
    def _remove(entity: int, system: ECSSystem) -> None:
        if entity in system.entities:
            system.entities.remove(entity)

    def __len__(self) -> int:
        return len(self._systems)