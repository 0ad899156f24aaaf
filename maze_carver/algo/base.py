import random
from abc import ABC, abstractmethod
from typing import Iterator
from maze_carver.core.grid import Grid

class Generator(ABC):
    # Emit a status line every N transitions from run()
    REPORT_EVERY = 100

    def __init__(self, grid: Grid, rng=None, seed: int = None):
        self.grid = grid
        # Anything with choice(seq) will do; seed=None pulls from OS entropy
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @property
    @abstractmethod
    def is_complete(self) -> bool:
        pass

    @abstractmethod
    def step(self) -> bool:
        """
        Performs a single state transition in place on self.grid.
        Returns True when the transition carved a new passage.
        """
        pass

    def status(self) -> str:
        return f"Steps: {self.step_count}"

    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        while not self.is_complete:
            self.step()
            if self.step_count % self.REPORT_EVERY == 0:
                yield self.status()
        yield "Done"

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
