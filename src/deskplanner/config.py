"""
Configuration for the floor-plan core
"""

# Geometry
POINT_PRECISION = 2  # Decimals kept by Point on construction
PIXELS_PER_METRE = 50.0  # Editor canvas scale
AREA_PRECISION = 2  # Decimals of room areas in m²

# Cycle extraction
WALK_GUARD_FACTOR = 2  # A face walk never visits more than 2·|E| darts
FIRST_STEP_DIRECTION = (0.0, -1.0)  # Reference heading for the pivot step

# Rooms
ROOM_NAME_PATTERN = "Room {number}"

# Logging
LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"
