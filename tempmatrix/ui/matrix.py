"""
Temperature Matrix UI Module

Streamlit page for the year x month temperature matrix. The dataset is loaded
once per session; afterwards only the background mode changes, toggled by a
click on the chart or the toggle button. The tooltip of the selected cell is
repeated below the chart.
"""

from typing import List, Optional, Tuple

import streamlit as st

from tempmatrix import config as cfg
from tempmatrix.core.encoding import EncodingEngine
from tempmatrix.core.interaction import InteractionController
from tempmatrix.core.loader import DataLoadError, load_daily_rows
from tempmatrix.core.matrix_viz import create_temperature_matrix_figure
from tempmatrix.core.pipeline import build_view_state
from tempmatrix.models.temperature import ViewState
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)

VIEW_STATE_KEY = "tempmatrix_view_state"
LAST_CLICK_KEY = "tempmatrix_last_click"
CHART_KEY = "temperature_matrix"

LOAD_ERROR_MESSAGE = "Error loading/processing data. Check the application log for details."


def render(data_path: str = cfg.DATA_PATH, year_count: int = cfg.YEAR_COUNT):
    """Main entry point for the temperature matrix page."""
    st.header(f"Monthly Temperature Matrix (Last {year_count} Years)")
    st.caption(
        "Cell colour: monthly extreme. Lines: daily max (green) and daily min (cyan). "
        "Click the chart to switch between MAX and MIN."
    )

    try:
        view_state = _load_view_state(data_path, year_count)
    except DataLoadError as e:
        logger.exception(f"Temperature data load failed: {e}")
        st.error(LOAD_ERROR_MESSAGE)
        return

    if view_state.matrix.empty:
        st.warning("No valid temperature observations found")
        return

    engine = EncodingEngine(view_state)
    controller = InteractionController(view_state, engine)

    chart_state = st.session_state.get(CHART_KEY)
    if _consume_chart_click(chart_state):
        controller.click()
    _sync_tooltip(controller, chart_state)

    col1, col2 = st.columns([1, 4])
    with col1:
        if st.button("Toggle MAX / MIN", key="tempmatrix_toggle"):
            controller.toggle()
    with col2:
        st.markdown(f"**Background encodes:** {controller.mode_label}")

    try:
        fig = create_temperature_matrix_figure(engine.plan())
        st.plotly_chart(
            fig,
            key=CHART_KEY,
            on_select="rerun",
            selection_mode="points",
            config={"displayModeBar": False},
        )
        if controller.tooltip is not None:
            st.markdown(controller.tooltip.text(cfg.TEMPERATURE_UNIT), unsafe_allow_html=True)
    except Exception as e:
        st.error(f"Error creating temperature matrix: {e}")
        logger.exception("Temperature matrix render error")


def _load_view_state(data_path: str, year_count: int) -> ViewState:
    """
    Return the session ViewState, building it on first use.

    :raises DataLoadError: If the dataset cannot be loaded
    """
    view_state = st.session_state.get(VIEW_STATE_KEY)
    if view_state is not None:
        return view_state

    rows = load_daily_rows(data_path)
    view_state = build_view_state(rows, year_count)
    st.session_state[VIEW_STATE_KEY] = view_state
    logger.debug(f"Cached view state for {len(view_state.years)} years")
    return view_state


def _selected_points(chart_state) -> List[dict]:
    if not chart_state:
        return []
    try:
        return list(chart_state["selection"]["points"])
    except (KeyError, TypeError):
        return []


def _selection_signature(chart_state) -> tuple:
    return tuple(
        (point.get("x"), point.get("y"), point.get("curve_number"))
        for point in _selected_points(chart_state)
    )


def _consume_chart_click(chart_state) -> bool:
    """
    True once per click on the chart.

    Plotly reports clicks through the selection state. Selecting a point and
    clearing the selection (clicking the selected point again) are both
    clicks; a rerun that leaves the selection unchanged is not.
    """
    signature = _selection_signature(chart_state)
    if signature == st.session_state.get(LAST_CLICK_KEY, ()):
        return False
    st.session_state[LAST_CLICK_KEY] = signature
    return True


def _selected_cell(chart_state) -> Optional[Tuple[int, int]]:
    """(year, month) of the selected cell marker, if any."""
    for point in _selected_points(chart_state):
        customdata = point.get("customdata")
        if customdata and len(customdata) == 2:
            return int(customdata[0]), int(customdata[1])
    return None


def _sync_tooltip(controller: InteractionController, chart_state) -> None:
    cell = _selected_cell(chart_state)
    if cell is None:
        controller.leave()
        return
    try:
        controller.hover(*cell)
    except (KeyError, ValueError):
        logger.warning(f"Selected cell {cell} is not in the matrix")
        controller.leave()
