from typing import Dict, Type
from maze_scad.algo.base import Generator
from maze_scad.algo.dfs import RecursiveBacktracker
from maze_scad.algo.kruskal import RandomKruskal
from maze_scad.algo.prim import PrimsAlgorithm

GENERATORS: Dict[str, Type[Generator]] = {
    "kruskal": RandomKruskal,
    "dfs": RecursiveBacktracker,
    "prim": PrimsAlgorithm,
}

DEFAULT_ALGO = "kruskal"


def create_generator(name: str, grid, seed: int = None, rng=None) -> Generator:
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise ValueError(f"Unknown generator '{name}', expected one of {sorted(GENERATORS)}") from None
    return cls(grid, seed=seed, rng=rng)
