"""Entities: named containers of components."""

from __future__ import annotations

import logging
from typing import Dict, Type, TypeVar

from .component import Component

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Component)


class Entity:
    """A game object holding at most one component of each type."""

    def __init__(self, name: str = "Entity") -> None:
        self.name = name
        self.active = True
        self._components: Dict[type, Component] = {}
        logger.debug("Entity created: %s", name)

    def add_component(self, component: C) -> C:
        """Attach a component; if one of the same type exists, return that one."""
        if not isinstance(component, Component):
            raise TypeError("component must derive from Component")
        existing = self._components.get(type(component))
        if existing is not None:
            return existing  # type: ignore[return-value]
        self._components[type(component)] = component
        component.on_attach(self)
        return component

    def get_component(self, component_type: Type[C]) -> C:
        """Return the component of exactly this type, or raise KeyError."""
        try:
            return self._components[component_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError("Component not found on entity") from None

    def has_component(self, component_type: type) -> bool:
        return component_type in self._components

    def remove_component(self, component_type: type) -> None:
        component = self._components.pop(component_type, None)
        if component is not None:
            component.on_detach()

    def start(self) -> None:
        if not self.active:
            return
        for component in self._components.values():
            component.start()

    def update(self, delta_time: float) -> None:
        if not self.active:
            return
        for component in self._components.values():
            component.update(delta_time)

    def render(self) -> None:
        if not self.active:
            return
        for component in self._components.values():
            component.render()