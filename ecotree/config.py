from dataclasses import dataclass

# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
# Numeric tolerances
EPSILON = 1.0e-6  # Distances closer than this compare as equal.

# Newick output
DISTANCE_DECIMALS = 5  # Fixed-point digits written after each colon.

# --- Default Layout Constants ---
COLLAPSED_MINIMUM_WIDTH = 0.01  # Floor for the drawn width of a collapsed clade.

# Painter defaults (pixels)
DEFAULT_FONT_HEIGHT = 12
DEFAULT_FONT_WIDTH = 7
DEFAULT_X_OFFSET = 5
DEFAULT_Y_OFFSET = 5
DEFAULT_LABEL_X_OFFSET = 3
DEFAULT_LABEL_Y_OFFSET = 5
DEFAULT_X_MODIFIER = 1000  # Pixels per unit of branch length.
DEFAULT_STROKE_WIDTH = 1

# Style Defaults
DEFAULT_STROKE_COLOR = "black"
DEFAULT_FONT_COLOR = "blue"
FONT_MONOSPACE = "monospace"


@dataclass
class RenderConfig:
    """Configuration for painting a tree onto a drawing surface."""

    x_modifier: float = DEFAULT_X_MODIFIER
    x_offset: int = DEFAULT_X_OFFSET
    y_offset: int = DEFAULT_Y_OFFSET
    label_x_offset: int = DEFAULT_LABEL_X_OFFSET
    label_y_offset: int = DEFAULT_LABEL_Y_OFFSET
    stroke_width: int = DEFAULT_STROKE_WIDTH
    stroke_color: str = DEFAULT_STROKE_COLOR
    font_color: str = DEFAULT_FONT_COLOR
    logger_name: str = "ecotree.plot"
