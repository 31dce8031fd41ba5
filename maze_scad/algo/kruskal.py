import logging
from typing import Iterator
from maze_scad.core.groups import DisjointSet
from maze_scad.algo.base import Generator

logger = logging.getLogger(__name__)

class RandomKruskal(Generator):
    """
    Randomized Kruskal with edge rejection.

    Picks a random cell and a random side; the pick is thrown away when the
    side is a boundary or both cells already share a group. Every accepted
    pick joins two groups, so exactly cell_count - 1 walls end up open and
    the open walls form a spanning tree.

    The retry loop has no formal bound. A grid whose navigate() is not
    symmetric can stop it from ever finishing, so picks per accepted wall
    are capped by an assert as a diagnostic.
    """

    MAX_ATTEMPTS_PER_EDGE = 1000

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng
        count = grid.cell_count()

        grid.close_all_walls()
        # Each cell starts as its own group
        groups = DisjointSet(count)

        logger.debug(f"Joining {count} cells ({max(count - 1, 0)} walls to open)")
        cap = self.MAX_ATTEMPTS_PER_EDGE * max(count, 1)

        for _ in range(count - 1):
            attempts = 0
            while True:
                attempts += 1
                assert attempts <= cap, f"No wall accepted after {cap} picks; navigate() is inconsistent"

                c1 = rng.randrange(count)
                s1 = rng.randrange(len(grid.cell(c1).walls))
                target = grid.navigate(c1, s1)
                if target is None:
                    continue

                c2, s2 = target
                if not groups.union(c1, c2):
                    # Already connected, opening this wall would close a loop
                    continue

                grid.cell(c1).walls[s1] = False
                grid.cell(c2).walls[s2] = False
                break

            self.step_count += 1
            if self.step_count % 100 == 0:
                yield f"Joined... Groups: {groups.group_count}"

        logger.debug(f"Opened {self.step_count} walls")
        yield "Done"
