import streamlit as st
from datetime import date
from punchsync.api.schemas.preferences import PreferencesUpdate
from punchsync.api.schemas.reports import ReportRequest
from punchsync.ui.api_client import get_client, APIError
from punchsync.ui.state import init_session, set_report_response

init_session()
st.title("Report Setup")

client = get_client()

try:
    prefs = client.get_preferences()
except APIError as e:
    st.error(f"Failed to load preferences: {e.detail}")
    st.stop()

with st.form("setup"):
    c1, c2 = st.columns(2)
    employee_name = c1.text_input("Employee name (column D)", value=prefs.employee_name, placeholder="e.g. alex lu")
    hourly_rate = c2.number_input("Hourly rate", min_value=0.0, value=float(prefs.hourly_rate), step=1.0)
    source_url = st.text_input("Data source URL", value=prefs.source_url, placeholder="https://script.google.com/...")
    month = st.text_input("Month (YYYY-MM)", value=date.today().strftime("%Y-%m"))
    submitted = st.form_submit_button("Load data")

if submitted:
    if not source_url.strip():
        st.warning("Enter the data source URL first.")
        st.stop()
    try:
        request = ReportRequest(
            source_url=source_url.strip(),
            month=month,
            employee_name=employee_name,
            hourly_rate=hourly_rate,
        )
    except ValueError as e:
        st.error(f"Invalid input: {e}")
        st.stop()

    with st.spinner("Syncing..."):
        try:
            response = client.generate_report(request)
        except APIError as e:
            st.error(f"Loading failed. Check that the URL is readable by anyone. ({e.detail})")
            st.stop()

    client.save_preferences(PreferencesUpdate(
        employee_name=employee_name, hourly_rate=hourly_rate, source_url=source_url,
    ))
    set_report_response(response)
    st.success(f"Read {response.row_count} rows. Open the Dashboard page.")
