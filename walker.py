# walker.py
# Follows the path drawn on a map from '@' to 'x', one cell per step.

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

import utils
from utils import START, END, JUNCTION, BLANK, LETTERS, Heading
from grid import Grid
from errors import (
    NoStartFound,
    MultipleOrMissingStart,
    MultipleOrMissingEnd,
    InvalidCharacter,
    DeadEnd,
    ForkDetected,
    BrokenPath,
    FakeTurn,
    InfiniteLoop,
)

Coord = Tuple[int, int]


@dataclass(frozen=True)
class TraversalResult:
    letters: str
    path: str
    steps: int = field(default=0, compare=False)
    trail: Tuple[Coord, ...] = field(default=(), compare=False, repr=False)

    def to_dict(self):
        return {"letters": self.letters, "path": self.path, "steps": self.steps}


class Walker:
    """
    Single-use traversal of one map.

    State: current position and heading, the path and letters collected so
    far, and the letter cells already counted. A letter cell crossed twice
    shows up in ``path`` both times but in ``letters`` only once.
    """

    def __init__(self, grid: Grid, max_steps: Optional[int] = None):
        self.grid = grid
        self.max_steps = utils.MAX_STEPS if max_steps is None else max_steps
        self.position: Optional[Coord] = None
        self.heading: Optional[Heading] = None
        self.path = []
        self.letters = []
        self.seen_letters = set()
        self.trail = []
        self.steps = 0

    def check_markers(self):
        starts = self.grid.count_marker(START)
        if starts == 0:
            raise NoStartFound("Start position (@) not found")
        if starts > 1:
            raise MultipleOrMissingStart(f"Expected one start (@), found {starts}")
        ends = self.grid.count_marker(END)
        if ends != 1:
            raise MultipleOrMissingEnd(f"Expected one end (x), found {ends}")

    def run(self) -> TraversalResult:
        self.check_markers()
        self.position = self.grid.find_start()
        self.path.append(START)
        self.trail.append(self.position)

        while True:
            cell = self.grid.cell_at(self.position)
            if cell == END and self.steps > 0:
                return TraversalResult(
                    letters=''.join(self.letters),
                    path=''.join(self.path),
                    steps=self.steps,
                    trail=tuple(self.trail),
                )
            if not self.grid.is_path_character(cell):
                raise InvalidCharacter(cell, self.position)
            if cell in LETTERS and self.position not in self.seen_letters:
                self.letters.append(cell)
                self.seen_letters.add(self.position)
            self.step(self.next_heading(cell))

    def step(self, heading: Heading):
        self.heading = heading
        self.position = self.grid.neighbor(self.position, heading)
        self.path.append(self.grid.cell_at(self.position))
        self.trail.append(self.position)
        self.steps += 1
        if self.steps > self.max_steps:
            raise InfiniteLoop(f"Gave up after {self.max_steps} steps", self.position)

    def next_heading(self, cell: str) -> Heading:
        if self.heading is None:
            return self._leave_start()
        if cell == JUNCTION:
            return self._turn(at_junction=True)
        ahead = self.grid.neighbor(self.position, self.heading)
        if self.grid.cell_at(ahead) != BLANK:
            return self.heading
        # Letters may sit on a corner
        if cell in LETTERS:
            return self._turn(at_junction=False)
        raise BrokenPath("Path ends before reaching x", self.position)

    def _open_headings(self, headings):
        return [h for h in headings if self.grid.is_open(self.grid.neighbor(self.position, h))]

    def _leave_start(self) -> Heading:
        options = self._open_headings(Heading)
        if not options:
            raise DeadEnd("No way out of the start", self.position)
        if len(options) > 1:
            raise ForkDetected("More than one way out of the start", self.position)
        return options[0]

    def _turn(self, at_junction: bool) -> Heading:
        options = self._open_headings(self.heading.perpendicular)
        if len(options) == 1:
            return options[0]
        if options:
            raise ForkDetected("Path forks", self.position)
        if not at_junction:
            raise BrokenPath("Path ends before reaching x", self.position)
        if self.grid.is_open(self.grid.neighbor(self.position, self.heading)):
            raise FakeTurn("Junction without a turn", self.position)
        raise DeadEnd("Junction leads nowhere", self.position)


def traverse(diagram: Union[Grid, str, Sequence[str]], max_steps: Optional[int] = None) -> TraversalResult:
    """Walk ``diagram`` from '@' to 'x'.

    Returns the letters collected and the characters walked over. Raises a
    ``NavigationError`` subclass describing why the map is malformed. A
    plain string is split into rows.
    """
    if isinstance(diagram, Grid):
        grid = diagram
    elif isinstance(diagram, str):
        grid = Grid.from_text(diagram)
    else:
        grid = Grid(diagram)
    return Walker(grid, max_steps=max_steps).run()
