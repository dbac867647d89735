"""Constants and defaults.

Note: Keep user-facing messages here so the service and the tests share them.
"""

MSG_EMPLOYEE_UPDATED = "Employee updated successfully."
MSG_EMPLOYEE_DELETED = "Employee deleted successfully."
MSG_EMPLOYEE_NOT_FOUND = "Employee not found."

NO_DATA = "-"
