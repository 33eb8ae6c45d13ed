"""Default sizing parameters for the responsive wheel.

Sizes in pixels unless noted.
"""

OUTER_CIRCLE_PERCENT = 90.0     # outer radius, % of half the limiting dimension
INNER_CIRCLE_PERCENT = 30.0     # inner radius, % of half the limiting dimension
MIN_SIZE = 0.0                  # lower clamp on the limiting dimension
MAX_SIZE = 9999.0               # upper clamp on the limiting dimension
DEBOUNCE_DELAY_MS = 100         # resize coalescing window (ms)
