"""User-facing form inputs, validated before any action is called."""

from pydantic import BaseModel, Field

from backend.app.models.common import AttractionPreference


class RouteGeneratorForm(BaseModel):
    """The "generate route" form. Units are the ones a user types in."""

    prompt: str = Field(
        ...,
        min_length=10,
        description="Please describe your ideal exploration in at least 10 characters.",
    )
    radius_km: float = Field(2.0, ge=0.5, le=10)
    time_limit_hours: float = Field(2.0, ge=0.5, le=6)
    preferences: list[AttractionPreference] = Field(default_factory=list)

    @property
    def radius_meters(self) -> float:
        return self.radius_km * 1000

    @property
    def time_limit_minutes(self) -> float:
        return self.time_limit_hours * 60

    def preferences_text(self) -> str:
        """Preferences joined into a single descriptive string."""
        return ", ".join(p.value for p in self.preferences)

    def model_prompt(self) -> str:
        """Free-text prompt with the selected preferences appended."""
        prompt = self.prompt.strip()
        if self.preferences:
            prompt = f"{prompt} User is interested in: {self.preferences_text()}."
        return prompt


class RouteAdjusterForm(BaseModel):
    """The "adjust route" form."""

    traffic_conditions: str = Field(..., min_length=5)
    time_constraints: str = Field(..., min_length=5)
