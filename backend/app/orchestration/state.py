"""Session state for the exploration planner UI."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from backend.app.models.adjustment import RouteAdjustment
from backend.app.models.common import Coordinates
from backend.app.models.route import GeneratedRoute
from backend.app.models.summary import RouteSummary


class GenerationPhase(str, Enum):
    """Sequential generate -> summarize machine."""

    idle = "idle"
    generating = "generating"
    summarizing = "summarizing"


class AdjustmentPhase(str, Enum):
    """Independent adjust machine; never blocked by generation."""

    idle = "idle"
    adjusting = "adjusting"


@dataclass(frozen=True)
class Notice:
    """Transient, dismissible message for the user."""

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


@dataclass
class SessionState:
    """Everything the UI renders for one interactive session."""

    generated_route: GeneratedRoute | None = None
    route_summary: RouteSummary | None = None
    route_adjustment: RouteAdjustment | None = None

    live_location: Coordinates | None = None
    custom_start_location: Coordinates | None = None

    generation_phase: GenerationPhase = GenerationPhase.idle
    adjustment_phase: AdjustmentPhase = AdjustmentPhase.idle

    notices: list[Notice] = field(default_factory=list)

    @property
    def generating(self) -> bool:
        return self.generation_phase == GenerationPhase.generating

    @property
    def summarizing(self) -> bool:
        # Raised together with `generating` so the UI can show one indicator
        return self.generation_phase in (GenerationPhase.generating, GenerationPhase.summarizing)

    @property
    def adjusting(self) -> bool:
        return self.adjustment_phase == AdjustmentPhase.adjusting

    @property
    def start_location(self) -> Coordinates | None:
        """Custom override wins over live geolocation."""
        return self.custom_start_location or self.live_location

    def loading_flags(self) -> dict[str, bool]:
        return {
            "generating": self.generating,
            "summarizing": self.summarizing,
            "adjusting": self.adjusting,
        }

    def clear_route(self) -> None:
        self.generated_route = None
        self.route_summary = None
        self.route_adjustment = None
