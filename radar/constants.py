"""Named layout constants for the radar chart.

Lengths are fractions of the chart size. The pixel comments give the value
at the reference size of 600.
"""

REFERENCE_SIZE = 600.0

# Radii
OUTER_RADIUS_FRACTION = 0.4          # 240 px outer grid ring
INNER_RADIUS_FRACTION = 0.15         # 90 px center disc
INNER_LABEL_FRACTION = 0.75          # category labels at 3/4 of outer radius (not of size)

# Grid
RING_COUNT = 5

# Outer zone band
BAND_WIDTH_FRACTION = 40.0 / REFERENCE_SIZE          # 40 px wedge band
ZONE_LABEL_OFFSET_FRACTION = 30.0 / REFERENCE_SIZE   # 30 px beyond outer ring

# Text and markers
LINE_HEIGHT_FRACTION = 13.0 / REFERENCE_SIZE   # 13 px per label line
MARKER_RADIUS_FRACTION = 4.0 / REFERENCE_SIZE  # 4 px data point dot
ALIGN_EPSILON = 1e-6                           # |cos| below this is centered

# Zone layouts
EQUAL_ARC = "equal-arc"
QUADRANT = "quadrant"
QUADRANT_ZONES = 4

# Style tokens
STYLE_BACKGROUND = "background"
STYLE_ZONE_RING = "zone-ring"
STYLE_GRID = "grid"
STYLE_ZONE_FILL = "zone-fill"
STYLE_ZONE_DIVIDER = "zone-divider"
STYLE_DATA_FILL = "data-fill"
STYLE_DATA_MARKER = "data-marker"
STYLE_LABEL = "label-text"
STYLE_ZONE_LABEL = "zone-label"
STYLE_CENTER = "center-disc"
