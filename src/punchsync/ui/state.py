"""Session-state helpers for the Streamlit UI.

No ORM, no DB; only reads/writes ``st.session_state``.
"""
import streamlit as st
from typing import Optional

from punchsync.api.schemas.reports import ReportResponse


def init_session() -> None:
    """Initialize session state variables."""
    if "report_response" not in st.session_state:
        st.session_state["report_response"] = None


def get_report_response() -> Optional[ReportResponse]:
    """Last report fetched in this session, if any."""
    return st.session_state.get("report_response")


def set_report_response(response: ReportResponse) -> None:
    st.session_state["report_response"] = response
