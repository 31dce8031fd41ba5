from typing import Iterator, List
from maze_scad.algo.base import Generator

class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid
        count = grid.cell_count()

        grid.close_all_walls()
        if count == 0:
            yield "Done"
            return

        # Start at cell 0
        visited = bytearray(count)
        visited[0] = 1
        stack: List[int] = [0]

        while stack:
            current = stack[-1]

            # Neighbours not yet part of the maze
            neighbors = [(other, side) for other, side, _ in grid.neighbors(current)
                         if not visited[other]]

            if neighbors:
                other, side = neighbors[rng.randrange(len(neighbors))]

                # Carve
                grid.open_wall(current, side)
                visited[other] = 1

                stack.append(other)
                self.step_count += 1

                # Yield every N steps to keep the preview responsive
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack
                stack.pop()

        yield "Done"
