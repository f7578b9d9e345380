import streamlit as st

from agencydash.ui.api_client import APIError, get_client

st.title("Agent Commissions")

client = get_client()

try:
    commissions = client.get_agent_commissions()
except APIError as e:
    st.error(f"Failed to load agent commissions: {e.detail}")
    st.stop()

if not commissions.items:
    st.info("No agents found.")
    st.stop()

c1, c2, c3 = st.columns(3)
c1.metric("Agents", commissions.total)
c2.metric("Commission Received", f"{sum(a.total_received for a in commissions.items):,.2f}")
c3.metric("Commission Due", f"{sum(a.commission_due for a in commissions.items):,.2f}")

st.divider()

st.dataframe(
    [
        {
            "Agent": a.name,
            "Contact": a.contact_person or "",
            "Rate %": a.commission_rate,
            "Students": a.students_count,
            "Received": a.total_received,
            "Due": a.commission_due,
        }
        for a in commissions.items
    ],
    use_container_width=True,
)
