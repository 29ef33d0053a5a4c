PERCENT_MIN = 0.00
PERCENT_MAX = 100.00

# Draws are made with this many decimal places
DRAW_DECIMALS = 2

# Hairline gap between adjacent ranges
RANGE_GAP = 0.01

# Known float artifacts that get snapped back to the bounds
HIGH_SNAP_FROM = 99.99
LOW_SNAP_FROM = 0.01

# Snap points must match exactly, up to float representation noise
SNAP_TOLERANCE = 1e-9
