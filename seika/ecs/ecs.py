"""The entity component system as a whole: entities, components and systems."""

from __future__ import annotations

from typing import Any

from seika.ecs.component import ComponentManager, ComponentRegistry
from seika.ecs.ec_system import SystemManager
from seika.ecs.entity import EntityManager


class ECS:
    """Owns an entity manager, component registry and storage, and a system manager."""

    def __init__(self) -> None:
        self.entities = EntityManager()
        self.registry = ComponentRegistry()
        self.components = ComponentManager(self.registry)
        self.systems = SystemManager(self.components)

    def finalize(self) -> None:
        """Destroy every registered system."""
        self.systems.finalize()

    def __enter__(self) -> ECS:
        return self

    def __exit__(self, *args: Any) -> None:
        self.finalize()