"""Shared constants."""

# Friend filter: letters, digits and spaces (the web client sanitizes to match)
FRIEND_FILTER_PATTERN = r"^[a-zA-Z0-9\s]*$"

# Display value used when a friend's address has no city
NO_CITY = "-"

# Extra characters allowed in country/city filters besides letters, digits, spaces
LOCATION_EXTRA_CHARS = "-'"

MAX_NAME_LENGTH = 50
MAX_EMAIL_LENGTH = 200
MAX_ADDRESS_FIELD_LENGTH = 100
MAX_QUOTE_TEXT_LENGTH = 300
MAX_QUOTE_AUTHOR_LENGTH = 100
MAX_ZIP_CODE = 99999
