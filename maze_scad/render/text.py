from maze_scad.core.grid import SquareGrid


def render_text(grid: SquareGrid) -> str:
    """
    Draws the maze as ASCII art, one cell per 4 characters:

        *---*---*
        | 0   1 |
        *   *---*
        | 2   3 |
        *---*---*

    Only the up and left walls of each cell are drawn; the last column's
    right wall and the bottom row's down walls are always drawn closed.
    """
    if not isinstance(grid, SquareGrid):
        raise TypeError(f"Text rendering needs a SquareGrid, got {type(grid).__name__}")

    lines = []
    for y in range(grid.height):
        # Tops
        row = []
        for x in range(grid.width):
            cell = grid.cell(y * grid.width + x)
            row.append("*---" if cell.walls[SquareGrid.UP] else "*   ")
        lines.append("".join(row) + "*")

        # Lefts
        row = []
        for x in range(grid.width):
            index = y * grid.width + x
            cell = grid.cell(index)
            edge = "|" if cell.walls[SquareGrid.LEFT] else " "
            row.append(f"{edge}{index:2d} ")
        lines.append("".join(row) + "|")

    # Bottom
    lines.append("*---" * grid.width + "*")
    return "\n".join(lines) + "\n"
