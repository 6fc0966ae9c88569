"""Main entry point for the Enrollment Admin Dashboard."""
import streamlit as st
from config.logging_config import setup_logging
from services.dashboard_service import EnrollmentDashboard
from services.record_source import MongoRecordSource

setup_logging()

# Page configuration
st.set_page_config(
    page_title="Enrollment Admin Dashboard",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for compact responsive theme
st.markdown("""
<style>
    /* Remove default padding and margins */
    .main .block-container {
        padding-top: 0.5rem;
        padding-bottom: 0rem;
        max-width: 100%;
    }

    /* Reduce header sizes */
    h1 {
        font-size: 1.8rem !important;
        margin-bottom: 0.5rem !important;
        margin-top: 0rem !important;
    }

    h2 {
        font-size: 1.4rem !important;
        margin-bottom: 0.3rem !important;
        margin-top: 0.5rem !important;
    }

    /* Compact VIEW buttons */
    .stButton > button {
        background-color: #f3f4f6;
        color: #4b5563;
        border: none;
        border-radius: 6px;
        padding: 0.3rem 0.8rem;
        font-weight: 700;
        font-size: 0.75rem;
    }
    .stButton > button:hover {
        background-color: #e5e7eb;
    }

    /* Responsive design */
    @media (max-width: 768px) {
        .main .block-container {
            padding-left: 0.5rem;
            padding-right: 0.5rem;
        }
        h1 {
            font-size: 1.4rem !important;
        }
    }
</style>
""", unsafe_allow_html=True)

PAGES = ("📊 Dashboard", "👥 Students")

def get_dashboard():
    """Session-scoped dashboard, loaded on first use."""
    if "dashboard" not in st.session_state:
        dashboard = EnrollmentDashboard(MongoRecordSource())
        dashboard.reload()
        st.session_state.dashboard = dashboard
    return st.session_state.dashboard

def main():
    """Main application entry point."""
    dashboard = get_dashboard()

    with st.sidebar:
        st.title("🎓 Enrollment")
        page = st.radio("Navigate", PAGES, label_visibility="collapsed")
        if st.button("🔄 Reload", use_container_width=True):
            dashboard.reload()

    if page == PAGES[0]:
        show_dashboard_page(dashboard)
    else:
        show_students_interface(dashboard)

def show_dashboard_page(dashboard):
    """Display counts and recent applications."""
    from views.admin_dashboard import show_admin_dashboard
    show_admin_dashboard(dashboard)

def show_students_interface(dashboard):
    """Display the student roster."""
    from views.students_page import show_students_page
    show_students_page(dashboard)

if __name__ == "__main__":
    main()
