"""Streamlit UI for the RoamFree exploration planner.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio  # noqa: E402

import streamlit as st  # noqa: E402
from pydantic import ValidationError  # noqa: E402

from backend.app.auth import LocalTokenAuthProvider  # noqa: E402
from backend.app.config import get_settings  # noqa: E402
from backend.app.features.formatting import (  # noqa: E402
    format_duration,
    saved_route_caption,
    truncate,
)
from backend.app.features.map_view import build_map_view, map_points  # noqa: E402
from backend.app.models.common import AttractionPreference, Coordinates  # noqa: E402
from backend.app.models.forms import RouteAdjusterForm, RouteGeneratorForm  # noqa: E402
from backend.app.orchestration.session import ExplorationSession  # noqa: E402
from ui.helpers import alternative_rows, build_local_store, build_session  # noqa: E402

settings = get_settings()

# Page config
st.set_page_config(
    page_title="RoamFree",
    page_icon="🧭",
    layout="wide",
)

# Initialize session state
if "store" not in st.session_state:
    st.session_state.store = build_local_store(settings)
if "session" not in st.session_state:
    st.session_state.session = build_session(settings, st.session_state.store)
    asyncio.run(st.session_state.session.refresh_location())

auth = LocalTokenAuthProvider(st.session_state.store)
session: ExplorationSession = st.session_state.session


def show_notices() -> None:
    for notice in session.drain_notices():
        if notice.variant == "destructive":
            st.error(f"**{notice.title}**: {notice.description}")
        else:
            st.toast(f"**{notice.title}**: {notice.description}")


def form_errors(e: ValidationError) -> str:
    return " | ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())


# =============================================================================
# LOGIN GATE (mock: any non-empty token is accepted)
# =============================================================================
if not auth.is_authenticated():
    st.title("🧭 RoamFree")
    with st.form("login_form"):
        username = st.text_input("Username")
        st.text_input("Password", type="password")
        if st.form_submit_button("Log in", type="primary"):
            if username.strip():
                auth.login(f"mock-token-{username.strip()}")
                st.rerun()
            else:
                st.error("Please enter a username.")
    st.stop()

st.title("🧭 RoamFree")
st.markdown("*Describe an outing, get an exploration route.*")
if st.sidebar.button("Log out"):
    auth.logout()
    st.rerun()

state = session.state
col_left, col_right = st.columns([1, 1.4])

# =============================================================================
# LEFT COLUMN - CONTROL PANEL
# =============================================================================
with col_left:
    tab_generate, tab_details, tab_adjust, tab_wishlist = st.tabs(
        ["✨ Generate", "📋 Details", "🔀 Adjust", "❤️ Wishlist"]
    )

    # --- GENERATE ---
    with tab_generate:
        st.subheader("Start point")
        if state.custom_start_location:
            start = state.custom_start_location
            st.success(f"Custom start: Lat {start.lat:.4f}, Lng {start.lng:.4f}")
            if st.button("Clear custom start"):
                session.set_custom_start_location(None)
                st.rerun()
        elif state.live_location:
            loc = state.live_location
            st.info(f"Using your location: Lat {loc.lat:.4f}, Lng {loc.lng:.4f}")
        else:
            st.warning("Enable location services or set a custom starting point.")
            if st.button("Retry location"):
                asyncio.run(session.refresh_location())
                st.rerun()

        query = st.text_input("Search for a start point")
        if query.strip():
            predictions = asyncio.run(session.search_places(query))
            if predictions:
                labels = {p.description: p.place_id for p in predictions}
                choice = st.selectbox("Matches", options=list(labels))
                if st.button("Use this place"):
                    asyncio.run(session.set_custom_start_from_place(labels[choice]))
                    st.rerun()

        with st.expander("Set coordinates manually"):
            lat = st.number_input("Latitude", min_value=-90.0, max_value=90.0, value=0.0, format="%.5f")
            lng = st.number_input(
                "Longitude", min_value=-180.0, max_value=180.0, value=0.0, format="%.5f"
            )
            if st.button("Use coordinates"):
                session.set_custom_start_location(Coordinates(lat=lat, lng=lng))
                st.rerun()

        st.divider()

        with st.form("generate_form"):
            prompt = st.text_area(
                "Describe your ideal exploration *",
                placeholder="e.g., A scenic walk with historical landmarks and a good coffee stop.",
            )
            radius_km = st.number_input("Radius (km)", min_value=0.5, max_value=10.0, value=2.0, step=0.1)
            hours = st.number_input(
                "Time limit (hours)", min_value=0.5, max_value=6.0, value=2.0, step=0.25
            )
            preferences = st.multiselect(
                "Attractions", options=[p.value for p in AttractionPreference]
            )
            busy = state.generating or state.summarizing
            submitted = st.form_submit_button(
                "Generating..." if busy else "🚀 Generate Route",
                type="primary",
                disabled=busy,
                use_container_width=True,
            )

            if submitted:
                try:
                    form = RouteGeneratorForm(
                        prompt=prompt,
                        radius_km=radius_km,
                        time_limit_hours=hours,
                        preferences=preferences,
                    )
                except ValidationError as e:
                    st.error(f"❌ {form_errors(e)}")
                else:
                    with st.spinner("Planning your route..."):
                        asyncio.run(session.submit_generate(form))
                    st.rerun()

    # --- DETAILS ---
    with tab_details:
        route = state.generated_route
        if route is None:
            st.info("Generate a route or pick one from your wishlist to see details.")
        else:
            if state.route_summary:
                st.markdown("#### Summary")
                st.markdown(state.route_summary.summary)
            elif state.summarizing:
                st.info("⏳ Summarizing...")

            st.markdown("#### Route")
            st.markdown(route.route_description)
            st.caption(f"Est. Time: {format_duration(route.total_estimated_time)}")

            if route.locations:
                for i, location in enumerate(route.locations, start=1):
                    st.markdown(f"**{i}. {location.name}**  \n{location.description}")
            else:
                st.caption("_No specific locations in this route._")

            if session.is_saved(route.id):
                if st.button("💔 Remove from wishlist"):
                    session.remove_from_wishlist(route.id)
                    st.rerun()
            elif st.button("❤️ Add to wishlist"):
                session.add_to_wishlist()
                st.rerun()

    # --- ADJUST ---
    with tab_adjust:
        if state.generated_route is None:
            st.info("Generate a route first to get adjustment suggestions.")
        else:
            st.caption(f"Current route: {truncate(state.generated_route.route_description, 120)}")
            with st.form("adjust_form"):
                traffic = st.text_area("Traffic conditions *", placeholder="e.g., Heavy traffic downtown")
                constraints = st.text_area(
                    "Time constraints *", placeholder="e.g., Need to be back by 5 PM"
                )
                adjust_submitted = st.form_submit_button(
                    "Analyzing Alternatives..." if state.adjusting else "Suggest Adjustments",
                    disabled=state.adjusting,
                )
                if adjust_submitted:
                    try:
                        adjust_form = RouteAdjusterForm(
                            traffic_conditions=traffic, time_constraints=constraints
                        )
                    except ValidationError as e:
                        st.error(f"❌ {form_errors(e)}")
                    else:
                        with st.spinner("Looking for alternatives..."):
                            asyncio.run(session.submit_adjust(adjust_form))
                        st.rerun()

            if state.route_adjustment:
                rows = alternative_rows(state.route_adjustment)
                if rows:
                    st.table(rows)
                else:
                    st.caption("_No alternative routes suggested._")

    # --- WISHLIST ---
    with tab_wishlist:
        saved_routes = session.saved_routes()
        if not saved_routes:
            st.info("Your wishlist is empty. Save routes from the Details tab.")
        for saved in saved_routes:
            st.markdown(f"**{truncate(saved.route_description)}**")
            st.caption(saved_route_caption(saved))
            col_view, col_remove = st.columns(2)
            if col_view.button("👁️ View", key=f"view-{saved.id}"):
                session.select_wishlist_item(saved.id)
                st.rerun()
            if col_remove.button("🗑️ Remove", key=f"remove-{saved.id}"):
                session.remove_from_wishlist(saved.id)
                st.rerun()

    show_notices()

# =============================================================================
# RIGHT COLUMN - MAP
# =============================================================================
with col_right:
    st.subheader("🗺️ Map")
    view = build_map_view(state)
    points = map_points(view)
    if points:
        st.map(
            {
                "lat": [p["lat"] for p in points],
                "lon": [p["lon"] for p in points],
            },
            latitude="lat",
            longitude="lon",
        )
        for point in points:
            st.caption(f"📍 {point['label']}")
    else:
        st.map(
            {"lat": [view.center_point.lat], "lon": [view.center_point.lng]},
            latitude="lat",
            longitude="lon",
        )
