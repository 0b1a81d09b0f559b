import streamlit as st
from punchsync.ui.api_client import get_client, APIError
from punchsync.ui.state import get_report_response

st.title("Dashboard")

response = get_report_response()
if response is None:
    st.warning("Load data on the Setup page first.")
    st.stop()

report = response.report

c1, c2, c3 = st.columns(3)
c1.metric("Pay this month", f"${report.total_pay:,}" if report else "$0")
c2.metric("Total hours", f"{report.total_hours:.2f}" if report else "0.00")
c3.metric("Month", response.month)

st.divider()

if report is None:
    st.subheader(f"No records for “{response.employee_name}”")
    st.write("The data loaded, but nothing matched the name and month. Check the column mapping:")

    left, right = st.columns(2)
    with left:
        st.write("**Detected employees**")
        if response.detected_names:
            for name in response.detected_names:
                st.code(name)
        else:
            st.info("No names detected; check that column D holds employee names.")
    with right:
        st.write("**Column mapping**")
        mapping = response.mapping
        st.table([
            {"role": role, "column": getattr(mapping, role) or "not found",
             "matched by": mapping.matched_by.get(role, "-")}
            for role in ("name", "date", "start", "end", "break_minutes", "notes")
        ])
    st.stop()

st.subheader(f"Punch detail: {response.employee_name or 'all employees'} ({len(report.shifts)} days)")
st.dataframe(
    [
        {
            "Date": s.date, "Start": s.start, "End": s.end, "Break (min)": s.break_minutes,
            "Hours": f"{s.total_hours:.2f}", "Notes": s.notes, "Flags": ", ".join(s.flags),
        }
        for s in report.shifts
    ],
    use_container_width=True,
)

st.divider()
st.subheader("AI summary")
if st.button("Generate summary"):
    client = get_client()
    try:
        insight = client.report_insight(report)
    except APIError as e:
        st.error(f"Summary failed: {e.detail}")
    else:
        if insight.generated:
            st.markdown(insight.text)
        else:
            st.info(insight.text)
