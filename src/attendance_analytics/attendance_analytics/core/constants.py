"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MILLIS_PER_HOUR = 3_600_000
MILLIS_PER_MINUTE = 60_000

OVERTIME_THRESHOLD_HOURS = 8
DEFAULT_RANKING_LIMIT = 5

# Month abbreviations accepted by the `months` query parameter (case-sensitive).
MONTH_ABBREVIATIONS = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}

# Spreadsheet header -> AttendanceRecord field.
IMPORT_COLUMNS = {
    "Name": "employee",
    "Log In": "login_time",
    "Log Out": "logout_time",
    "date": "date",
}

IMPORT_SUCCESS_MESSAGE = "Data imported successfully"
