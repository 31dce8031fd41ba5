from typing import Iterator, List, Set
from maze_scad.algo.base import Generator

class PrimsAlgorithm(Generator):
    def run(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid
        count = grid.cell_count()

        grid.close_all_walls()
        if count == 0:
            yield "Done"
            return

        visited = bytearray(count)
        visited[0] = 1

        # Frontier cells: unvisited cells next to the maze. The set gives O(1)
        # membership, the list gives O(1) random choice.
        frontier_set: Set[int] = set()
        frontier_list: List[int] = []

        def add_frontier(index):
            for other, _, _ in grid.neighbors(index):
                if not visited[other] and other not in frontier_set:
                    frontier_set.add(other)
                    frontier_list.append(other)

        add_frontier(0)

        while frontier_list:
            # Pick random cell from frontier, swap remove for O(1)
            idx = rng.randrange(len(frontier_list))
            current = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.discard(current)

            # Carve to ONE visited neighbour
            options = [side for other, side, _ in grid.neighbors(current) if visited[other]]
            side = options[rng.randrange(len(options))]
            grid.open_wall(current, side)
            visited[current] = 1
            self.step_count += 1

            add_frontier(current)

            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier_list)}"

        yield "Done"
