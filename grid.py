import sys

from colorama import Fore, Style
from utils import (
    START, END, JUNCTION, BLANK, LETTERS, PATH_CHARS, PRINT_LOCK,
)
from errors import NoStartFound


def is_path_character(ch):
    return ch in PATH_CHARS


class Grid:
    """
    Read-only view over the rows of a map.
      - cell_at((r, c)) -> character, BLANK when out of range
      - is_open((r, c)) -> bool, a path character we could step on
      - find_start() -> (r, c) of the first '@'
      - count_marker(ch) -> occurrences across the whole map
    Rows may have different lengths; anything past a row's end reads as blank.
    """

    __slots__ = ("_rows",)

    def __init__(self, lines):
        self._rows = tuple(lines)

    @classmethod
    def from_text(cls, text):
        """Split ``text`` into rows, dropping trailing blank lines but keeping leading spaces."""
        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        return cls(lines)

    # ---------- Public API ----------
    @property
    def rows(self):
        return self._rows

    @property
    def height(self):
        return len(self._rows)

    @property
    def width(self):
        return max((len(row) for row in self._rows), default=0)

    def cell_at(self, coord):
        r, c = coord
        if r < 0 or c < 0 or r >= len(self._rows):
            return BLANK
        row = self._rows[r]
        if c >= len(row):
            return BLANK
        return row[c]

    is_path_character = staticmethod(is_path_character)

    def is_open(self, coord):
        return self.cell_at(coord) in PATH_CHARS

    def neighbor(self, coord, heading):
        dr, dc = heading.value
        return (coord[0] + dr, coord[1] + dc)

    def find_start(self):
        for r, row in enumerate(self._rows):
            c = row.find(START)
            if c != -1:
                return (r, c)
        raise NoStartFound("Start position (@) not found")

    def count_marker(self, ch):
        return sum(row.count(ch) for row in self._rows)

    # ---------- Dunder helpers ----------
    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return "\n".join(self._rows)

    def __repr__(self):
        return f"Grid({list(self._rows)!r})"


def load_grid(path):
    """Read a map from ``path``; ``-`` reads standard input."""
    if path == '-':
        return Grid.from_text(sys.stdin.read())
    with open(path, 'r') as f:
        return Grid.from_text(f.read())


def print_grid(grid, trail=None):
    """Thread-safe printing of a map. If ``trail`` is provided, the cells it
    visits are highlighted and the rest of the map is dimmed."""
    visited = set(trail) if trail else set()
    with PRINT_LOCK:
        lines = []
        for r, row in enumerate(grid.rows):
            line = []
            for c in range(grid.width):
                ch = grid.cell_at((r, c))
                if ch == BLANK:
                    line.append(ch)
                elif ch == START:
                    line.append(Fore.YELLOW + ch + Style.RESET_ALL)
                elif ch == END:
                    line.append(Fore.RED + ch + Style.RESET_ALL)
                elif visited and (r, c) not in visited:
                    line.append(Style.DIM + ch + Style.RESET_ALL)
                elif ch in LETTERS:
                    line.append(Fore.GREEN + ch + Style.RESET_ALL)
                elif ch == JUNCTION:
                    line.append(Fore.MAGENTA + ch + Style.RESET_ALL)
                elif is_path_character(ch):
                    line.append(Fore.CYAN + ch + Style.RESET_ALL)
                else:
                    line.append(Fore.LIGHTRED_EX + ch + Style.RESET_ALL)
            lines.append(''.join(line).rstrip())
        print('\n'.join(lines), flush=True)
        print(flush=True)
