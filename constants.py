# --- Grid Structure ---
DEFAULT_ROWS = 10
DEFAULT_COLS = 10

# --- Cell Directions ---
DIR_TOP = "top"
DIR_RIGHT = "right"
DIR_BOTTOM = "bottom"
DIR_LEFT = "left"

# Fixed exploration order for neighbour lookups and the solver
DIRECTIONS = (DIR_TOP, DIR_RIGHT, DIR_BOTTOM, DIR_LEFT)

OPPOSITE = {
    DIR_TOP: DIR_BOTTOM,
    DIR_RIGHT: DIR_LEFT,
    DIR_BOTTOM: DIR_TOP,
    DIR_LEFT: DIR_RIGHT,
}

# (d_row, d_col) per direction
OFFSETS = {
    DIR_TOP: (-1, 0),
    DIR_RIGHT: (0, 1),
    DIR_BOTTOM: (1, 0),
    DIR_LEFT: (0, -1),
}

# --- ASCII Rendering ---
ASCII_CORNER = "+"
ASCII_HORIZONTAL_WALL = "---"
ASCII_HORIZONTAL_OPEN = "   "
ASCII_VERTICAL_WALL = "|"
ASCII_VERTICAL_OPEN = " "
ASCII_CELL_EMPTY = "   "
ASCII_CELL_PATH = " * "

# --- Tolerances ---
GEOMETRY_TOLERANCE = 1e-9  # For floating point comparisons

# --- 2D STL Export ---
DEFAULT_CELL_SIZE = 1.0
MAZE_2D_WALL_THICKNESS = 0.15
MAZE_2D_WALL_HEIGHT = 0.6
MAZE_2D_BASE_HEIGHT = MAZE_2D_WALL_HEIGHT / 3.0

# --- Visualization ---
VIS_DPI = 150
VIS_WALL_LINE_STYLE = "k-"
VIS_WALL_LINE_LW = 1.5
VIS_WALL_LINE_ALPHA = 0.7  # Used in solution plot walls
VIS_SOLUTION_LINE_STYLE = "r-"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9
VIS_ENTRY_MARKER = "go"
VIS_EXIT_MARKER = "ro"
VIS_SOLUTION_ENTRY_MARKER_SIZE = 8
VIS_SOLUTION_ENTRY_MFC = "lime"
VIS_SOLUTION_ENTRY_MEC = "black"
VIS_SOLUTION_EXIT_MARKER_SIZE = 8
VIS_SOLUTION_EXIT_MFC = "red"
VIS_SOLUTION_EXIT_MEC = "black"
VIS_CONN_COLORMAP = "viridis"
VIS_CONN_UNREACHABLE_COLOR = "lightgrey"
