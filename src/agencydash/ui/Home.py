import streamlit as st

from agencydash.ui.validation import run_all_checks

st.set_page_config(page_title="Agency Dashboard", layout="wide")
st.title("Agency Dashboard")

errors = run_all_checks()
if errors:
    for err in errors:
        st.error(err)
else:
    st.success("Backend reachable. Open the Dashboard page from the sidebar.")
