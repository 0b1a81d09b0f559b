import streamlit as st
import streamlit.components.v1 as components
from punchsync.ui.api_client import get_client, APIError
from punchsync.ui.state import get_report_response

st.title("Print Preview")

response = get_report_response()
if response is None or response.report is None:
    st.warning("Nothing to print yet; build a report with data first.")
    st.stop()

client = get_client()
try:
    html = client.print_report(response.report, response.employee_name)
except APIError as e:
    st.error(f"Failed to render report: {e.detail}")
    st.stop()

st.download_button("Download HTML", data=html, file_name=f"timesheet-{response.month}.html", mime="text/html")
components.html(html, height=1200, scrolling=True)
