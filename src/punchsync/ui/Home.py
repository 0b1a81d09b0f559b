import streamlit as st
from punchsync.ui.state import init_session

st.set_page_config(page_title="punchsync", page_icon="🕒", layout="wide")
init_session()

st.title("punchsync Timesheet")
st.write(
    "Sync punch-clock rows from your spreadsheet and settle the month's pay. "
    "Start on **Setup**, review the **Dashboard**, then open **Print** for a signed copy."
)
