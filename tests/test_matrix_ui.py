"""
test_matrix_ui.py
Unit tests for the temperature matrix streamlit page.

Streamlit is replaced with a MagicMock; session state is a plain dict.
"""

from unittest.mock import MagicMock, patch

import pytest

import tempmatrix.ui.matrix as matrix_ui
from tempmatrix.core.loader import DataLoadError
from tempmatrix.models.temperature import Mode

CSV_TEXT = "date,max_temperature,min_temperature\n2023-07-15,34,27\n2024-01-10,12,3\n"


@pytest.fixture
def mock_st():
    with patch.object(matrix_ui, "st") as st:
        st.session_state = {}
        st.columns.return_value = [MagicMock(), MagicMock()]
        st.button.return_value = False
        yield st


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "temperature_daily.csv"
    path.write_text(CSV_TEXT)
    return str(path)


class TestRender:
    """Test matrix_ui.render."""

    def test_renders_chart_and_caches_state(self, mock_st, csv_path):
        matrix_ui.render(csv_path, 10)

        mock_st.plotly_chart.assert_called_once()
        view_state = mock_st.session_state[matrix_ui.VIEW_STATE_KEY]
        assert view_state.years == (2023, 2024)
        assert view_state.mode is Mode.EXTREME_MAX

    def test_view_state_built_once(self, mock_st, csv_path):
        matrix_ui.render(csv_path, 10)
        first = mock_st.session_state[matrix_ui.VIEW_STATE_KEY]

        with patch.object(matrix_ui, "load_daily_rows") as loader:
            matrix_ui.render(csv_path, 10)
            loader.assert_not_called()

        assert mock_st.session_state[matrix_ui.VIEW_STATE_KEY] is first

    def test_load_failure_shows_message(self, mock_st, tmp_path):
        matrix_ui.render(str(tmp_path / "missing.csv"), 10)

        mock_st.error.assert_called_once_with(matrix_ui.LOAD_ERROR_MESSAGE)
        mock_st.plotly_chart.assert_not_called()

    def test_loader_error_type(self, mock_st):
        with patch.object(matrix_ui, "load_daily_rows", side_effect=DataLoadError("boom")):
            matrix_ui.render("anything.csv", 10)
        mock_st.error.assert_called_once_with(matrix_ui.LOAD_ERROR_MESSAGE)

    def test_empty_dataset_warns(self, mock_st, tmp_path):
        path = tmp_path / "bad_rows.csv"
        path.write_text("date,max_temperature,min_temperature\nnot-a-date,1,1\n")

        matrix_ui.render(str(path), 10)

        mock_st.warning.assert_called_once()
        mock_st.plotly_chart.assert_not_called()

    def test_button_toggles_mode(self, mock_st, csv_path):
        mock_st.button.return_value = True
        matrix_ui.render(csv_path, 10)

        assert mock_st.session_state[matrix_ui.VIEW_STATE_KEY].mode is Mode.EXTREME_MIN

    def test_chart_click_toggles_once(self, mock_st, csv_path):
        matrix_ui.render(csv_path, 10)
        mock_st.session_state[matrix_ui.CHART_KEY] = {
            "selection": {"points": [{"x": 120.0, "y": 80.0, "curve_number": 2}]}
        }

        matrix_ui.render(csv_path, 10)
        assert mock_st.session_state[matrix_ui.VIEW_STATE_KEY].mode is Mode.EXTREME_MIN

        # same selection on a later rerun is not a new click
        matrix_ui.render(csv_path, 10)
        assert mock_st.session_state[matrix_ui.VIEW_STATE_KEY].mode is Mode.EXTREME_MIN


    def test_reselecting_same_cell_toggles_every_click(self, mock_st, csv_path):
        """Test select, deselect, select on one cell toggles three times."""
        point = {"selection": {"points": [{"x": 120.0, "y": 80.0, "curve_number": 2}]}}
        cleared = {"selection": {"points": []}}

        modes = []
        for chart_state in (point, cleared, point):
            mock_st.session_state[matrix_ui.CHART_KEY] = chart_state
            matrix_ui.render(csv_path, 10)
            modes.append(mock_st.session_state[matrix_ui.VIEW_STATE_KEY].mode)

        assert modes == [Mode.EXTREME_MIN, Mode.EXTREME_MAX, Mode.EXTREME_MIN]

    def test_selected_cell_tooltip(self, mock_st, csv_path):
        """Test the clicked cell's tooltip is shown with the new mode."""
        mock_st.session_state[matrix_ui.CHART_KEY] = {
            "selection": {
                "points": [{"x": 1.0, "y": 1.0, "curve_number": 2, "customdata": [2023, 6]}]
            }
        }

        matrix_ui.render(csv_path, 10)

        texts = [c.args[0] for c in mock_st.markdown.call_args_list]
        tooltip = next(t for t in texts if "Date: 2023-07" in t)
        assert "max: <b>34</b> °C" in tooltip
        assert "min: <b>27</b> °C" in tooltip
        assert "Background encodes: MIN" in tooltip

    def test_no_tooltip_without_selection(self, mock_st, csv_path):
        matrix_ui.render(csv_path, 10)

        texts = [c.args[0] for c in mock_st.markdown.call_args_list]
        assert not any("Date:" in t for t in texts)


class TestSelectionSignature:
    """Test click detection helpers."""

    def test_empty_states(self):
        assert matrix_ui._selection_signature(None) == ()
        assert matrix_ui._selection_signature({}) == ()
        assert matrix_ui._selection_signature({"selection": {"points": []}}) == ()

    def test_selected_cell(self):
        state = {"selection": {"points": [{"curve_number": 0}, {"customdata": [2024, 0]}]}}
        assert matrix_ui._selected_cell(state) == (2024, 0)
        assert matrix_ui._selected_cell({"selection": {"points": []}}) is None
