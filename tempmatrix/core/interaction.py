"""
interaction.py

Mode toggling and tooltip handling for the temperature matrix.

The controller is the only writer of ``ViewState.mode``. A click anywhere on the
chart flips the mode and recolours the cells; the matrix and domain ranges are
never rebuilt. Hovering a cell produces a tooltip that always reports both
extremes, whichever mode is active.
"""

from typing import TYPE_CHECKING, Dict, Optional

from tempmatrix import config as cfg
from tempmatrix.models.temperature import (
    MatrixCell,
    Mode,
    TooltipPayload,
    ViewState,
    format_temperature,
)
from tempmatrix.utils.log_util import app_logger

if TYPE_CHECKING:
    from tempmatrix.core.encoding import EncodingEngine

logger = app_logger(__name__)


def tooltip_for(cell: MatrixCell, mode: Mode) -> TooltipPayload:
    """Build the hover payload for one cell."""
    return TooltipPayload(
        label=cell.key,
        max_extreme=format_temperature(cell.monthly_max_extreme, cfg.MISSING_LABEL),
        min_extreme=format_temperature(cell.monthly_min_extreme, cfg.MISSING_LABEL),
        mode_label=mode.label,
    )


class InteractionController:
    """Owns the two-state mode machine and the current tooltip."""

    def __init__(self, view_state: ViewState, engine: "EncodingEngine"):
        self.view_state = view_state
        self.engine = engine
        self._tooltip: Optional[TooltipPayload] = None

    @property
    def mode(self) -> Mode:
        return self.view_state.mode

    @property
    def mode_label(self) -> str:
        return self.view_state.mode.label

    @property
    def tooltip(self) -> Optional[TooltipPayload]:
        return self._tooltip

    def toggle(self) -> Dict[str, str]:
        """
        Flip between EXTREME_MAX and EXTREME_MIN.

        :return: Recomputed background fill per cell key
        """
        self.view_state.mode = self.view_state.mode.toggled()
        logger.debug(f"Background mode -> {self.mode_label}")

        if self._tooltip is not None:
            self._tooltip = TooltipPayload(
                label=self._tooltip.label,
                max_extreme=self._tooltip.max_extreme,
                min_extreme=self._tooltip.min_extreme,
                mode_label=self.mode_label,
            )
        return self.engine.recolor()

    def click(self) -> Dict[str, str]:
        """Primary click anywhere on the chart surface."""
        return self.toggle()

    def hover(self, year: int, month: int) -> TooltipPayload:
        """
        Show the tooltip for the cell under the pointer.

        :raises KeyError: If the year is not in the matrix
        """
        cell = self.view_state.matrix.cell(year, month)
        self._tooltip = tooltip_for(cell, self.view_state.mode)
        return self._tooltip

    def leave(self) -> None:
        """Pointer left the cell area."""
        self._tooltip = None
