"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EXPECTED_ID_LENGTH = 8

ROSTER_TABLE = "attendance_exist"
EVENTS_TABLE = "attendance_new"

EXPORT_FILENAME = "attendance_new.xlsx"
EXPORT_SHEET_NAME = "Attendance"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

BACKSPACE_KEYS = frozenset({"Backspace", "\b"})

# Server-side page state is forgotten after this much inactivity.
UI_SESSION_IDLE_SECONDS = 8 * 60 * 60
UI_SESSION_MAX = 1000
