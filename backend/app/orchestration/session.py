"""Client-side session controller.

Sequences "generate route" -> "summarize route", runs "adjust route"
independently, and reconciles the persisted wishlist with the active route.
All planning calls go through a PlanningActions implementation, so failures
arrive as ActionError values; the controller surfaces them as notices and
reverts the affected loading flag.

Overlapping generations are tagged with a sequence number. A result is applied
only if no newer generation has started; stale results are dropped without a
notice. Adjustments are bound to the route that was active when requested.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from backend.app.actions import PlanningActions
from backend.app.adapters.geolocation import GeolocationSource
from backend.app.adapters.places import PlacePrediction, PlaceSearch
from backend.app.db.wishlist import WishlistRepository
from backend.app.errors import GeolocationError, LocationUnavailable, PlaceResolutionFailed
from backend.app.models.actions import ActionError
from backend.app.models.adjustment import RouteAdjustmentInput
from backend.app.models.common import Coordinates
from backend.app.models.forms import RouteAdjusterForm, RouteGeneratorForm
from backend.app.models.route import GeneratedRoute, GenerateRouteInput, SavedRoute
from backend.app.models.summary import RouteSummary, SummarizeRouteInput
from backend.app.orchestration.state import AdjustmentPhase, GenerationPhase, Notice, SessionState

logger = logging.getLogger(__name__)

# Adjustment search radius (meters): fixed policy, not user-configurable
ADJUST_RADIUS_WITH_STOPS_M = 5000
ADJUST_RADIUS_FALLBACK_M = 2000


def adjustment_radius(route: GeneratedRoute) -> int:
    """Radius for an adjust request on the given route."""
    return ADJUST_RADIUS_WITH_STOPS_M if route.locations else ADJUST_RADIUS_FALLBACK_M


def build_summary_input(route: GeneratedRoute, preferences: str) -> SummarizeRouteInput:
    """Summarization request for a freshly generated route.

    The model does not report a distance, so it is left unknown.
    """
    return SummarizeRouteInput(
        route_description=route.route_description,
        estimated_time=f"{route.total_estimated_time} minutes",
        estimated_distance=None,
        attraction_preferences=preferences,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExplorationSession:
    """Long-lived interactive session; re-enters idle after every transition."""

    def __init__(
        self,
        actions: PlanningActions,
        wishlist: WishlistRepository,
        *,
        geolocation: GeolocationSource | None = None,
        places: PlaceSearch | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.actions = actions
        self.wishlist = wishlist
        self.geolocation = geolocation
        self.places = places
        self.clock = clock
        self.state = SessionState()
        self._generation_seq = 0
        self._adjustment_seq = 0

    # --- notices -----------------------------------------------------------

    def notify(self, title: str, description: str, *, error: bool = False) -> None:
        variant = "destructive" if error else "default"
        self.state.notices.append(Notice(title=title, description=description, variant=variant))

    def drain_notices(self) -> list[Notice]:
        """Hand pending notices to the UI and forget them."""
        notices, self.state.notices = self.state.notices, []
        return notices

    # --- location ----------------------------------------------------------

    async def refresh_location(self) -> Coordinates | None:
        """Ask the geolocation source for the current position.

        On failure the previous live location is kept and a notice is raised.
        """
        if self.geolocation is None:
            self.notify("Geolocation Error", "Geolocation is not available.", error=True)
            return None
        try:
            coordinates = await self.geolocation.get_current_position()
        except GeolocationError as e:
            logger.info(f"Geolocation failed: {e.kind.value}")
            self.notify("Geolocation Error", e.message, error=True)
            return None
        self.state.live_location = coordinates
        return coordinates

    async def resolve_start_location(self) -> Coordinates:
        """Custom start, else the cached live location, else one fresh lookup.

        Raises:
            LocationUnavailable: If no position can be determined
        """
        start = self.state.start_location
        if start is None and self.geolocation is not None:
            await self.refresh_location()
            start = self.state.start_location
        if start is None:
            raise LocationUnavailable(
                "Your current location is required to generate a route. "
                "Please enable location services or set a custom start point."
            )
        return start

    def set_custom_start_location(self, coordinates: Coordinates | None) -> None:
        """Set or clear the start override. In-flight calls are unaffected."""
        self.state.custom_start_location = coordinates

    async def search_places(self, query: str) -> list[PlacePrediction]:
        if self.places is None or not query.strip():
            return []
        try:
            return await self.places.predict(query)
        except Exception as e:
            logger.warning(f"Place search failed for {query!r}: {e}")
            self.notify("Place Search Failed", "Could not search for places right now.", error=True)
            return []

    async def set_custom_start_from_place(self, place_id: str) -> bool:
        """Resolve a search prediction and use it as the custom start."""
        if self.places is None:
            self.notify("Place Lookup Failed", "Place search is not available.", error=True)
            return False
        try:
            coordinates = await self.places.resolve(place_id)
        except PlaceResolutionFailed as e:
            self.notify("Place Lookup Failed", e.message, error=True)
            return False
        self.set_custom_start_location(coordinates)
        return True

    # --- generate -> summarize ---------------------------------------------

    async def submit_generate(self, form: RouteGeneratorForm) -> bool:
        """Generate a route and chain its summary.

        Returns:
            True if a route was generated and applied
        """
        try:
            start = await self.resolve_start_location()
        except LocationUnavailable as e:
            self.notify("Location Needed", e.message, error=True)
            return False

        self._generation_seq += 1
        seq = self._generation_seq

        self.state.clear_route()
        self.state.generation_phase = GenerationPhase.generating

        result = await self.actions.generate_exploration_route(
            GenerateRouteInput(
                prompt=form.model_prompt(),
                radius=form.radius_meters,
                time_limit=form.time_limit_minutes,
                current_location=start,
            )
        )

        if seq != self._generation_seq:
            logger.debug(f"Dropping stale generation #{seq}")
            return False

        if isinstance(result, ActionError):
            self.state.generation_phase = GenerationPhase.idle
            self.notify("Route Generation Failed", result.error, error=True)
            return False

        route = GeneratedRoute.from_output(result)
        self.state.generated_route = route
        self.state.generation_phase = GenerationPhase.summarizing
        self.notify("Route Generated!", "Explore your new adventure.")

        summary = await self.actions.summarize_generated_route(
            build_summary_input(route, form.preferences_text())
        )

        if seq != self._generation_seq:
            logger.debug(f"Dropping stale summary for generation #{seq}")
            return True

        self.state.generation_phase = GenerationPhase.idle

        active = self.state.generated_route
        if active is None or active.id != route.id:
            logger.debug(f"Active route changed while summarizing {route.id}, dropping summary")
            return True

        if isinstance(summary, ActionError):
            # Partial success: the route stays displayable without a summary
            self.notify("Route Summary Failed", summary.error, error=True)
        else:
            self.state.route_summary = summary
        return True

    # --- adjust ------------------------------------------------------------

    async def submit_adjust(self, form: RouteAdjusterForm) -> bool:
        """Ask for alternatives to the active route.

        Returns:
            True if an adjustment was applied
        """
        route = self.state.generated_route
        if route is None or self.state.start_location is None:
            self.notify(
                "Cannot Adjust Route",
                "A route must be generated first, and your location is required.",
                error=True,
            )
            return False

        self._adjustment_seq += 1
        seq = self._adjustment_seq

        self.state.route_adjustment = None
        self.state.adjustment_phase = AdjustmentPhase.adjusting

        result = await self.actions.adjust_exploration_route(
            RouteAdjustmentInput(
                current_route=route.route_description,
                traffic_conditions=form.traffic_conditions,
                time_constraints=form.time_constraints,
                radius=adjustment_radius(route),
            )
        )

        if seq != self._adjustment_seq:
            logger.debug(f"Dropping stale adjustment #{seq}")
            return False

        self.state.adjustment_phase = AdjustmentPhase.idle

        if isinstance(result, ActionError):
            self.notify("Route Adjustment Failed", result.error, error=True)
            return False

        active = self.state.generated_route
        if active is None or active.id != route.id:
            logger.info(f"Active route changed during adjustment of {route.id}, dropping result")
            return False

        self.state.route_adjustment = result
        self.notify("Route Adjustments Suggested", "Check out the alternative plans.")
        return True

    def _invalidate_adjustment(self) -> None:
        """Forget the current adjustment and drop any in-flight result."""
        self._adjustment_seq += 1
        self.state.route_adjustment = None
        self.state.adjustment_phase = AdjustmentPhase.idle

    # --- wishlist ----------------------------------------------------------

    def saved_routes(self) -> list[SavedRoute]:
        return self.wishlist.items()

    def is_saved(self, route_id: str) -> bool:
        return self.wishlist.contains(route_id)

    def add_to_wishlist(self) -> bool:
        route = self.state.generated_route
        if route is None:
            self.notify("Nothing to Save", "Generate a route before adding it to your wishlist.")
            return False
        if self.wishlist.add(route, saved_at=self.clock()) is None:
            self.notify("Already in Wishlist", "This route is already in your wishlist.")
            return False
        self.notify("Added to Wishlist", "Route saved for later.")
        return True

    def remove_from_wishlist(self, route_id: str) -> bool:
        removed = self.wishlist.remove(route_id)
        active = self.state.generated_route
        if active is not None and active.id == route_id:
            self.state.clear_route()
            self._invalidate_adjustment()
        if removed:
            self.notify("Removed from Wishlist", "Route removed from your wishlist.")
        return removed

    def select_wishlist_item(self, route_id: str) -> bool:
        saved = self.wishlist.get(route_id)
        if saved is None:
            self.notify("Route Not Found", "That route is no longer in your wishlist.", error=True)
            return False

        self.state.generated_route = saved.as_route()
        self.state.route_summary = RouteSummary(
            summary=f"Viewing saved route: {saved.route_description}"
        )
        self._invalidate_adjustment()
        self.state.custom_start_location = None
        return True
