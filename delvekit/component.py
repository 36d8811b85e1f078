"""Base component class and the transform component."""

from __future__ import annotations

from typing import Any, List, Optional


class Component:
    """Base class for anything that can be attached to an entity."""

    def __init__(self) -> None:
        self.owner: Optional[Any] = None

    def on_attach(self, owner: Any) -> None:
        """Called when the component is added to an entity."""
        self.owner = owner

    def on_detach(self) -> None:
        """Called when the component is removed from its entity."""
        self.owner = None

    def start(self) -> None:
        """Called once when the owning entity starts."""

    def update(self, delta_time: float) -> None:
        """Advance the component by ``delta_time`` seconds."""

    def render(self) -> List[Any]:
        """Return the draw commands for this component; the base draws nothing."""
        commands: List[Any] = []
        return commands


class TransformComponent(Component):
    """Position, rotation, scale and velocity in world space."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__()
        self.x = x
        self.y = y
        self.rotation = 0.0
        self.scale_x = 1.0
        self.scale_y = 1.0
        self.velocity_x = 0.0
        self.velocity_y = 0.0

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_scale(self, scale_x: float, scale_y: Optional[float] = None) -> None:
        """Set the scale; a single value scales both axes uniformly."""
        self.scale_x = scale_x
        self.scale_y = scale_x if scale_y is None else scale_y

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def rotate(self, delta_rotation: float) -> None:
        self.rotation += delta_rotation

    def set_velocity(self, vx: float, vy: float) -> None:
        self.velocity_x = vx
        self.velocity_y = vy

    def update(self, delta_time: float) -> None:
        """Move by the current velocity over ``delta_time``."""
        if self.velocity_x != 0.0 or self.velocity_y != 0.0:
            self.x += self.velocity_x * delta_time
            self.y += self.velocity_y * delta_time