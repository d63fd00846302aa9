"""
Constants and configuration values for Histogram Compare.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Histogram constants
BIN_COUNT = 256
MAX_CHANNEL_VALUE = BIN_COUNT - 1
SLOT_COUNT = 2

# Rendering surface constants
DEFAULT_CANVAS_WIDTH = 512
DEFAULT_CANVAS_HEIGHT = 256
SCALE_MARGIN = 8
STROKE_WIDTH = 1

# Horizontal offset (in bucket-width units) per slot so overlapping bars stay visible
SLOT_OFFSETS = (-0.5, 0.5)

# Stroke colors (RGB) and shared opacity
STROKE_ALPHA = 0.5
BRIGHTNESS_STROKE_COLOR = (0, 0, 0)
RED_STROKE_COLOR = (220, 0, 0)
GREEN_STROKE_COLOR = (0, 210, 0)
BLUE_STROKE_COLOR = (0, 0, 255)
BACKGROUND_COLOR = (255, 255, 255)

# Mode values as shown by the mode selector
MODE_VALUE_BRIGHTNESS = "value"
MODE_VALUE_COLOR = "color"

# Built-in reference pair shown when no images are given
REFERENCE_IMAGE_SIZE = (480, 320)
REFERENCE_WITHOUT_FLASH_NAME = "without_flash.png"
REFERENCE_WITH_FLASH_NAME = "with_flash.png"

# UI constants
DEFAULT_WINDOW_WIDTH = 1100
DEFAULT_WINDOW_HEIGHT = 780
PREVIEW_MIN_SIZE = 320
HISTOGRAM_VIEW_HEIGHT = 320

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
