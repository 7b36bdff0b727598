# Apollonian gasket global settings

# Tangency and duplicate tolerance, in canvas units
EPSILON = 0.1

# Circles smaller than this are discarded; bounds the recursion depth
MIN_RADIUS = 2.0

# Lower bound for the random radius of the second seed circle
SEED_MIN_RADIUS = 100.0

# Default canvas size for the seeded bounding circle
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 400

# Curvatures at or below this magnitude are treated as straight lines
EPS_BEND = 1e-12

# Use the uniform grid for the duplicate scan instead of a full scan
USE_SPATIAL_INDEX = True
