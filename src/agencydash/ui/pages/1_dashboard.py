import streamlit as st

from agencydash.animation import AnimatedCounter, BlockingFrameScheduler
from agencydash.config import settings
from agencydash.dashboard.charts import stats_breakdown
from agencydash.ui.api_client import APIError, get_client, load_stats_or_default

st.title("Dashboard")

client = get_client()
stats, notice = load_stats_or_default(client)
if notice:
    st.error(notice)

# --- Animated stat cards ---
cards = [
    ("Total Students", stats.total_students, ""),
    ("Universities", stats.total_universities, ""),
    ("Pending Applications", stats.active_applications, ""),
    ("Total Revenue", int(stats.total_revenue), "$"),
    ("Pending Tasks", stats.pending_tasks, ""),
    ("Agents", stats.total_agents, ""),
]

scheduler = BlockingFrameScheduler(interval_ms=settings.COUNTER_FRAME_INTERVAL_MS)
counters = []
for col, (label, value, prefix) in zip(st.columns(3) + st.columns(3), cards):
    col.caption(label)
    slot = col.empty()
    counter = AnimatedCounter(
        value,
        scheduler=scheduler,
        duration_ms=settings.COUNTER_DURATION_MS,
        prefix=prefix,
        on_change=lambda v, slot=slot, prefix=prefix: slot.markdown(f"## {prefix}{v:,}"),
    )
    counter.start()
    counters.append(counter)

scheduler.run()
for counter in counters:
    counter.close()

st.divider()

# --- Breakdown ---
st.subheader("People Overview")
slices = stats_breakdown(stats)
if any(s.value for s in slices):
    st.vega_lite_chart(None, {
        "data": {"values": [{"label": s.label, "value": s.value} for s in slices]},
        "mark": {"type": "arc", "outerRadius": 80},
        "encoding": {
            "theta": {"field": "value", "type": "quantitative"},
            "color": {
                "field": "label", "type": "nominal",
                "scale": {"domain": [s.label for s in slices], "range": [s.color for s in slices]},
            },
        },
    })
else:
    st.info("No data yet.")

st.divider()

# --- Recent activity ---
st.subheader("Recent Students")
try:
    recent = client.get_recent_activities()
except APIError as e:
    st.error(f"Failed to load recent activities: {e.detail}")
    st.stop()

if not recent.items:
    st.info("No students added yet.")
for item in recent.items:
    when = item.created_at.strftime("%Y-%m-%d") if item.created_at else ""
    st.write(f"**{item.first_name} {item.last_name or ''}** · {when}")
