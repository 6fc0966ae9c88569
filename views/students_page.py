"""Student roster with search, filters and a detail panel."""
import html
import streamlit as st
from components.status_badge import status_badge_html
from models.enrollment import Track
from utils.constants import ANY, GRADE_LEVELS, TERMS

ROW_BACKGROUNDS = ("#ffffff", "#f9fafb")

FILTER_WIDGETS = {
    "query": "roster_search",
    "track": "roster_track",
    "level": "roster_level",
    "term": "roster_term"
}

def show_students_page(dashboard):
    """Display the searchable student roster."""
    st.header("👥 Students")

    show_filters(dashboard)
    show_detail_panel(dashboard)
    show_roster(dashboard)

def _on_filter_change(dashboard, field):
    # Touching a filter is an interaction outside the detail panel
    dashboard.dismiss()
    dashboard.set_filter(**{field: st.session_state[FILTER_WIDGETS[field]]})

def show_filters(dashboard):
    """Search box and strand/grade/semester selects."""
    state = dashboard.filter_state
    col1, col2, col3, col4 = st.columns([3, 1, 1, 1])

    with col1:
        st.text_input(
            "Search",
            value=state.query,
            placeholder="Search by name...",
            key=FILTER_WIDGETS["query"],
            on_change=_on_filter_change,
            args=(dashboard, "query")
        )

    with col2:
        options = [ANY] + [track.value for track in Track]
        st.selectbox(
            "Strand",
            options=options,
            index=options.index(state.track) if state.track in options else 0,
            format_func=lambda x: "All Strands" if x == ANY else x,
            key=FILTER_WIDGETS["track"],
            on_change=_on_filter_change,
            args=(dashboard, "track")
        )

    with col3:
        options = [ANY] + list(GRADE_LEVELS)
        st.selectbox(
            "Grade Level",
            options=options,
            index=options.index(state.level) if state.level in options else 0,
            format_func=lambda x: "All Levels" if x == ANY else f"Grade {x}",
            key=FILTER_WIDGETS["level"],
            on_change=_on_filter_change,
            args=(dashboard, "level")
        )

    with col4:
        options = [ANY] + list(TERMS)
        st.selectbox(
            "Semester",
            options=options,
            index=options.index(state.term) if state.term in options else 0,
            format_func=lambda x: "All Semesters" if x == ANY else f"{x} Semester",
            key=FILTER_WIDGETS["term"],
            on_change=_on_filter_change,
            args=(dashboard, "term")
        )

def show_roster(dashboard):
    """Visible roster rows with VIEW buttons."""
    result = dashboard.roster()
    if not result.ok:
        st.error(f"⚠️ {result.error.message}")
        return

    rows = result.value
    st.caption(f"Showing {len(rows)} of {len(dashboard.engine.records)} students")

    if not rows:
        st.info("No students match the current filters")
        return

    for position, (index, record) in enumerate(rows):
        col1, col2 = st.columns([8, 1])
        with col1:
            st.markdown(roster_row_html(record, position), unsafe_allow_html=True)
        with col2:
            st.button("VIEW", key=f"view_{index}", on_click=dashboard.select, args=(index,))

def roster_row_html(record, position):
    """Markup for one roster row; background alternates by position."""
    background = ROW_BACKGROUNDS[position % 2]
    level = "" if record.level is None else record.level
    cells = "".join(
        f'<div style="flex: 1;">{html.escape(str(value))}</div>'
        for value in (record.display_name, record.track, level, record.term)
    )
    return f"""<div style="
        display: flex;
        align-items: center;
        background-color: {background};
        padding: 8px 12px;
        border-bottom: 1px solid #e5e7eb;
    ">{cells}<div style="flex: 1;">{status_badge_html(record.status)}</div></div>"""

def show_detail_panel(dashboard):
    """Selected student's details; hidden while the panel is closed."""
    view = dashboard.detail()
    if view is None:
        return

    with st.container(border=True):
        col1, col2 = st.columns([5, 1])
        with col1:
            st.subheader(f"🧑‍🎓 {view.display_name}")
        with col2:
            st.button("✖ Close", key="close_detail", on_click=dashboard.dismiss)

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.write(f"**Strand:** {view.track}")
        with col2:
            st.write(f"**Grade Level:** {view.level}")
        with col3:
            st.write(f"**Semester:** {view.term}")
        with col4:
            st.markdown(f"**Status:** {status_badge_html(view.status)}", unsafe_allow_html=True)
