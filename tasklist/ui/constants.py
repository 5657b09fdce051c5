"""UI constants for the Task List application."""

# Fixed display strings
APP_TITLE = "Task List"
PRIORITY_DIALOG_TITLE = "Select Priority"
SAVE_LABEL = "Save"
CANCEL_LABEL = "Cancel"
CLEAR_COMPLETED_LABEL = "🗑 Clear"
PRIORITY_BUTTON_LABEL = "✎"
NEW_TASK_PLACEHOLDER = "New task..."
EMPTY_LIST_MESSAGE = "No tasks"

# Task label line prefixes
PRIORITY_LINE_PREFIX = "Priority: "
ESTIMATED_HOURS_LINE_PREFIX = "Estimated hours: "

# Notification settings
MAX_NAME_LENGTH_IN_NOTIFICATION = 30
NOTIFICATION_TIMEOUT_SHORT = 2
