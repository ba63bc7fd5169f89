"""Constants for httpstat CLI."""

# Transport timeouts (seconds)
REQUEST_TIMEOUT = 30
CONNECT_TIMEOUT = 10

# Report layout
DURATION_WIDTH = 7
NOT_APPLICABLE = "N/A"
BODY_FILENAME = "httpstat_body.txt"
