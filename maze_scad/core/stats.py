from collections import deque
from maze_scad.core.grid import Maze


def count_open_walls(maze: Maze) -> int:
    """Open walls, each shared wall counted once."""
    return sum(1 for _ in maze.open_walls())


def is_connected(maze: Maze) -> bool:
    """True when every cell can be reached from cell 0 through open walls."""
    count = maze.cell_count()
    if count == 0:
        return True

    seen = bytearray(count)
    seen[0] = 1
    reached = 1
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for other in maze.open_neighbors(current):
            if not seen[other]:
                seen[other] = 1
                reached += 1
                queue.append(other)
    return reached == count


def is_spanning_tree(maze: Maze) -> bool:
    # Connected with exactly n - 1 edges implies acyclic
    count = maze.cell_count()
    if count == 0:
        return True
    return count_open_walls(maze) == count - 1 and is_connected(maze)


def calculate_stats(maze: Maze):
    dead_ends = 0
    intersections = 0 # 3+ exits
    corridors = 0 # 2 exits

    for index in range(maze.cell_count()):
        exits = sum(1 for _ in maze.open_neighbors(index))
        if exits == 1: dead_ends += 1
        elif exits == 2: corridors += 1
        elif exits >= 3: intersections += 1

    total = maze.cell_count()
    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "intersections": intersections,
        "open_walls": count_open_walls(maze),
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
    }
