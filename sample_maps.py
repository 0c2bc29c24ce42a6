# sample_maps.py
# Maps run by --samples: the valid ones with the walk they must produce,
# the invalid ones with the error they must raise.

from errors import (
    NoStartFound,
    MultipleOrMissingStart,
    MultipleOrMissingEnd,
    ForkDetected,
    BrokenPath,
    FakeTurn,
)

VALID_MAPS = {
    "basic example": [
        "  @---A---+",
        "          |",
        "  x-B-+   C",
        "      |   |",
        "      +---+",
    ],
    "go straight through intersections": [
        "  @",
        "  | +-C--+",
        "  A |    |",
        "  +---B--+",
        "    |      x",
        "    |      |",
        "    +---D--+",
    ],
    "letters may be found on turns": [
        "  @---A---+",
        "          |",
        "  x-B-+   |",
        "      |   |",
        "      +---C",
    ],
    "do not collect a letter from the same location twice": [
        "     +-O-N-+",
        "     |     |",
        "     |   +-I-+",
        " @-G-O-+ | | |",
        "     | | +-+ E",
        "     +-+     S",
        "             |",
        "             x",
    ],
    "keep direction, even in a compact space": [
        " +-L-+",
        " |  +A-+",
        "@B+ ++ H",
        " ++    x",
    ],
    "ignore stuff after end of path": [
        "  @-A--+",
        "       |",
        "       +-B--x-C--D",
    ],
}

# (letters, path)
EXPECTED_RESULTS = {
    "basic example": ("ACB", "@---A---+|C|+---+|+-B-x"),
    "go straight through intersections": ("ABCD", "@|A+---B--+|+--C-+|-||+---D--+|x"),
    "letters may be found on turns": ("ACB", "@---A---+|||C---+|+-B-x"),
    "do not collect a letter from the same location twice": (
        "GOONIES",
        "@-G-O-+|+-+|O||+-O-N-+|I|+-+|+-I-+|ES|x",
    ),
    "keep direction, even in a compact space": ("BLAH", "@B+++B|+-L-+A+++A-+Hx"),
    "ignore stuff after end of path": ("AB", "@-A--+|+-B--x"),
}

INVALID_MAPS = {
    "missing start character": [
        "     -A---+",
        "          |",
        "  x-B-+   C",
        "      |   |",
        "      +---+",
    ],
    "missing end character": [
        "   @--A---+",
        "          |",
        "    B-+   C",
        "      |   |",
        "      +---+",
    ],
    "multiple starts": [
        "   @--A-@-+",
        "          |",
        "  x-B-+   C",
        "      |   |",
        "      +---+",
    ],
    "fork in path": [
        "        x",
        "        |",
        "   @--A-+",
        "        |",
        "        B",
    ],
    "broken path": [
        "   @--A-+",
        "        |",
        "         ",
        "        B-x",
    ],
    "multiple starting paths": [
        "  x-B-@-A-x",
    ],
    "fake turn": [
        "  @-A-+-B-x",
    ],
}

EXPECTED_ERRORS = {
    "missing start character": NoStartFound,
    "missing end character": MultipleOrMissingEnd,
    "multiple starts": MultipleOrMissingStart,
    "fork in path": ForkDetected,
    "broken path": BrokenPath,
    "multiple starting paths": MultipleOrMissingEnd,
    "fake turn": FakeTurn,
}
