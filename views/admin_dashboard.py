"""Admin dashboard with enrollment counts and recent applications."""
import pandas as pd
import streamlit as st
from components.status_badge import status_cell_style
from models.enrollment import Track, Status

TRACK_LABELS = {
    Track.STEM.value: "🔬 STEM",
    Track.ABM.value: "💼 ABM",
    Track.TVL_ICT.value: "💻 TVL-ICT",
    Track.HUMSS.value: "📚 HUMSS"
}

STATUS_LABELS = {
    Status.PENDING.value: "⏳ Pending",
    Status.ENROLLED.value: "✅ Enrolled",
    Status.REJECTED.value: "❌ Rejected"
}

def show_admin_dashboard(dashboard):
    """Display strand counts, status counts and recent applications."""
    st.header("📊 Enrollment Dashboard")

    show_tally_section(dashboard)
    st.divider()
    show_recent_section(dashboard)

def show_tally_section(dashboard):
    """Display strand and enrollment status metric cards."""
    result = dashboard.tally()
    if not result.ok:
        st.error(f"⚠️ {result.error.message}")
        return

    tally = result.value

    st.subheader("🎓 Students per Strand")
    columns = st.columns(len(TRACK_LABELS))
    for column, (track, label) in zip(columns, TRACK_LABELS.items()):
        with column:
            st.metric(label, f"{tally.tracks[track]:,}")

    st.subheader("📋 Enrollment Count")
    columns = st.columns(len(STATUS_LABELS))
    for column, (status, label) in zip(columns, STATUS_LABELS.items()):
        with column:
            st.metric(label, f"{tally.statuses[status]:,}")

def show_recent_section(dashboard):
    """Display the recent enrollment applications table."""
    st.subheader("🕒 Recent Enrollment Applications")

    result = dashboard.recent()
    if not result.ok:
        st.error(f"⚠️ {result.error.message}")
        return

    if not result.value:
        st.info("No applications yet")
        return

    frame = recent_frame(result.value)
    st.dataframe(
        frame.style.map(status_cell_style, subset=["Status"]),
        use_container_width=True,
        hide_index=True
    )

def recent_frame(records):
    """Table rows for the recent applications list."""
    return pd.DataFrame(
        [
            {
                "Name": record.display_name,
                "Strand": record.track,
                "Grade Level": "" if record.level is None else str(record.level),
                "Semester": record.term,
                "Status": record.status
            }
            for record in records
        ],
        columns=["Name", "Strand", "Grade Level", "Semester", "Status"]
    )
