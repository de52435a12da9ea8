"""Constants used throughout the notifications app."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Performance Thresholds
# Unread list/count requests back user-facing badges and must stay fast.
SLOW_REQUEST_THRESHOLD = 0.5

# Unread list limits for the HTTP surface
MAX_UNREAD_LIMIT = 100
