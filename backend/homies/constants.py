"""Field bounds, the event date format and validation message templates."""

REQUIRED_ERROR_MESSAGE = "The field {0} is required"
STRING_LENGTH_ERROR_MESSAGE = "The field {0} must be between {2} and {1} characters long"

# Event
EVENT_MIN_NAME = 5
EVENT_MAX_NAME = 20

EVENT_MIN_DESCRIPTION = 15
EVENT_MAX_DESCRIPTION = 150

DATE_FORMAT = "yyyy-MM-dd H:mm"
INVALID_DATE_MESSAGE = f"Invalid date! Format must be: {DATE_FORMAT}"

# Type
TYPE_MIN_NAME = 5
TYPE_MAX_NAME = 15

UNKNOWN_TYPE_MESSAGE = "Unknown event type"

# Integer keys are stored as signed 64-bit values.
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1
