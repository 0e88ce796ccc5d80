"""
Pointer event variants delivered by the host drawing surface.

Events are a tagged variant with three cases. Each case exposes a position in
surface coordinates and a timestamp in milliseconds.
"""

import math
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional


@dataclass
class TouchContact:
    """A single touch contact with its reported force."""
    x: float
    y: float
    force: float


@dataclass
class InputEvent:
    """Base for all pointer event variants."""
    x: float
    y: float
    timestamp: float

    KIND: ClassVar[str] = "unknown"


@dataclass
class TouchEvent(InputEvent):
    """Touch event carrying the list of active contacts."""
    touches: List[TouchContact] = field(default_factory=list)

    KIND: ClassVar[str] = "touch"


@dataclass
class MouseEvent(InputEvent):
    """Mouse or trackpad event. Carries no pressure."""

    KIND: ClassVar[str] = "mouse"


@dataclass
class PointerEvent(InputEvent):
    """Pointer event with a pointer type tag ("mouse", "pen" or "touch")."""
    pointer_type: str = "mouse"
    pressure: Optional[float] = None

    KIND: ClassVar[str] = "pointer"

    @property
    def has_numeric_pressure(self) -> bool:
        """Whether the event reports a usable pressure value."""
        if isinstance(self.pressure, bool) or not isinstance(self.pressure, (int, float)):
            return False
        return not math.isnan(self.pressure)
