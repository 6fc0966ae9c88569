"""Status badge component for enrollment dispositions."""
import html
from utils.constants import STATUS_COLORS

# Unknown statuses fall back to the Rejected palette
DEFAULT_COLORS = STATUS_COLORS["Rejected"]

def status_badge_html(status):
    """Build the badge markup for a status."""
    background, color = STATUS_COLORS.get(status, DEFAULT_COLORS)
    return f"""<span style="
        background-color: {background};
        color: {color};
        padding: 2px 10px;
        border-radius: 9999px;
        font-size: 12px;
        font-weight: 600;
    ">{html.escape(status)}</span>"""

def status_cell_style(status):
    """CSS for a status cell in a pandas Styler."""
    background, color = STATUS_COLORS.get(status, DEFAULT_COLORS)
    return f"background-color: {background}; color: {color}; font-weight: 600"
