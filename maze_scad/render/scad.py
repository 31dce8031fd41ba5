from maze_scad.core.grid import SquareGrid

DEFAULT_BLOCK_SIZE = 10.0
DEFAULT_BLOCK_DEPTH = 10.0
DEFAULT_BALL_RADIUS = 4.9
DEFAULT_BALL_DEPTH = 5.2


class RenderSettings:
    """Dimensions (in mm) of the printed maze block and the ball channel."""

    __slots__ = ('block_size', 'block_depth', 'ball_radius', 'ball_depth')

    def __init__(self, block_size: float = DEFAULT_BLOCK_SIZE, block_depth: float = DEFAULT_BLOCK_DEPTH,
                 ball_radius: float = DEFAULT_BALL_RADIUS, ball_depth: float = DEFAULT_BALL_DEPTH):
        for name, value in (("block_size", block_size), ("block_depth", block_depth),
                            ("ball_radius", ball_radius), ("ball_depth", ball_depth)):
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")
        self.block_size = float(block_size)
        self.block_depth = float(block_depth)
        self.ball_radius = float(ball_radius)
        self.ball_depth = float(ball_depth)

    def __repr__(self):
        return (f"RenderSettings(block_size={self.block_size}, block_depth={self.block_depth}, "
                f"ball_radius={self.ball_radius}, ball_depth={self.ball_depth})")


HEADER = """\
// Global resolution
$fs = 0.1;  // Don't generate smaller facets than 0.1 mm
$fa = 10;    // Don't generate larger angles than 5 degrees

"""

MODULES = """\
module maze() color("red") linear_extrude(height = blockDepth) square([mazeWidth * blockSize, mazeHeight*blockSize]);

module ball() color("green") sphere(ballRadius);

module hcylinder() color("green") rotate([0, 90, 0]) cylinder(h = blockSize, r = ballRadius);

module vcylinder() color("green") rotate([-90, 0, 0]) cylinder(h = blockSize, r = ballRadius);

"""


def render_scad(grid: SquareGrid, settings: RenderSettings = None) -> str:
    """
    Builds an OpenSCAD script that carves the maze out of a solid slab.

    Every cell gets a sphere at its centre. An open right wall adds a
    horizontal cylinder towards the next cell, an open down wall a vertical
    one, so each passage is cut exactly once.
    """
    if not isinstance(grid, SquareGrid):
        raise TypeError(f"SCAD rendering needs a SquareGrid, got {type(grid).__name__}")
    if settings is None:
        settings = RenderSettings()

    out = [HEADER]
    out.append(f"mazeWidth = {grid.width};\n")
    out.append(f"mazeHeight = {grid.height};\n")
    out.append(f"blockSize = {settings.block_size:6f};\n")
    out.append(f"blockDepth = {settings.block_depth:6f};\n")
    out.append(f"ballRadius = {settings.ball_radius:6f};\n")
    out.append(f"ballDepth = {settings.ball_depth:6f};\n")
    out.append("\n")
    out.append(MODULES)

    out.append("translate([mazeWidth * blockSize / -2, mazeHeight * blockSize / -2, 0]) {\n")
    out.append("  difference() {\n")
    out.append("    maze();\n")
    out.append("    union() {\n")
    for y in range(grid.height):
        for x in range(grid.width):
            cell = grid.cell(y * grid.width + x)
            out.append(f"      translate([({x} + 0.5) * blockSize, ({y} + 0.5) * blockSize, ballDepth]) {{\n")
            out.append("        ball();\n")
            if not cell.walls[SquareGrid.RIGHT]:
                out.append("        hcylinder();\n")
            if not cell.walls[SquareGrid.DOWN]:
                out.append("        vcylinder();\n")
            out.append("      }\n")
    out.append("    }\n")
    out.append("  }\n")
    out.append("}\n")
    return "".join(out)
