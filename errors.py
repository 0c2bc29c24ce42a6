# errors.py
# Every way a map can be rejected. All of them are final: walking is
# deterministic, so trying again gives the same answer.

from typing import Optional, Tuple


class NavigationError(Exception):
    """Base class for malformed maps.

    ``kind`` is the class name, so callers can report the failure without
    matching on exception types; ``position`` is the (row, col) where the
    walk stopped, when there is one.
    """

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        if position is not None:
            message = f"{message} at {position[0]},{position[1]}"
        super().__init__(message)
        self.position = position

    @property
    def kind(self) -> str:
        return type(self).__name__


class MultipleOrMissingStart(NavigationError):
    pass


class NoStartFound(MultipleOrMissingStart):
    pass


class MultipleOrMissingEnd(NavigationError):
    pass


class InvalidCharacter(NavigationError):
    def __init__(self, char: str, position: Optional[Tuple[int, int]] = None):
        super().__init__(f"Invalid character {char!r} on path", position)
        self.char = char


class DeadEnd(NavigationError):
    pass


class ForkDetected(NavigationError):
    pass


class BrokenPath(NavigationError):
    pass


class FakeTurn(NavigationError):
    pass


class InfiniteLoop(NavigationError):
    pass
