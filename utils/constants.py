"""Application constants and configurations."""

# Record store field names (projection used by every query)
FIELD_LAST_NAME = "lname"
FIELD_FIRST_NAME = "fname"
FIELD_TRACK = "strand"
FIELD_LEVEL = "gradeLevel"
FIELD_TERM = "semester"
FIELD_STATUS = "enrollment_status"

RECORD_FIELDS = (
    FIELD_LEVEL, FIELD_LAST_NAME, FIELD_FIRST_NAME,
    FIELD_TERM, FIELD_TRACK, FIELD_STATUS
)

# Placeholder recency ordering until the store carries a timestamp
RECENT_ORDER_FIELD = FIELD_LAST_NAME

# Filter control sentinel for "no restriction"
ANY = "all"

# Selectable filter options
GRADE_LEVELS = ("11", "12")
TERMS = ("1st", "2nd")

# Shown for empty fields in the detail panel
MISSING_VALUE = "N/A"

# Status badge colors (background, text)
STATUS_COLORS = {
    "Pending": ("#fef9c3", "#854d0e"),
    "Enrolled": ("#dcfce7", "#166534"),
    "Rejected": ("#fee2e2", "#991b1b")
}

# Section error placeholders
SECTION_ERRORS = {
    "tally": "Failed to load student data.",
    "recent": "Failed to load recent applications.",
    "roster": "Error loading students."
}
