"""
Main streamlit.io application
"""

import streamlit as st

from tempmatrix import config as cfg
from tempmatrix.ui import matrix
from tempmatrix.utils.log_util import app_logger

logger = app_logger(__name__)

st.set_page_config(
    page_title="Temperature Matrix",
    layout="wide",
    initial_sidebar_state="collapsed",
)

logger.debug(f"Rendering temperature matrix from {cfg.DATA_PATH}")
matrix.render(cfg.DATA_PATH, cfg.YEAR_COUNT)
