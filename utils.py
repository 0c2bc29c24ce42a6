# --- utils.py ---

import time
import threading
import json
from enum import Enum
from colorama import Fore, Style, init
import os

init()

# Map characters
START = '@'
END = 'x'
JUNCTION = '+'
HORIZONTAL = '-'
VERTICAL = '|'
BLANK = ' '

LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
PATH_CHARS = frozenset({START, END, JUNCTION, HORIZONTAL, VERTICAL}) | LETTERS

# Step budget for a single traversal; far above any real map's cell count
MAX_STEPS = 100_000

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()


class Heading(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self):
        return _OPPOSITES[self]

    @property
    def perpendicular(self):
        """The two headings a turn can take from this one."""
        if self in (Heading.UP, Heading.DOWN):
            return (Heading.LEFT, Heading.RIGHT)
        return (Heading.UP, Heading.DOWN)


_OPPOSITES = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}


def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def log_traversal_to_file(name, rows, result=None, error=None):
    """Record a map and its outcome in a dated JSON file in the `logs` directory.
    Entries are keyed by map name, so walking the same map again replaces its entry."""
    logs_dir = os.path.join(os.getcwd(), 'logs')
    os.makedirs(logs_dir, exist_ok=True)
    log_file = os.path.join(logs_dir, f"traversal_{time.strftime('%Y-%m-%d')}.json")

    log_data = {"maps": {}}

    # If file exists, keep what is already logged
    if os.path.exists(log_file):
        try:
            with open(log_file, 'r') as f:
                log_data = json.load(f)
        except json.JSONDecodeError:
            log_with_time(f"Ignoring unreadable log file {log_file}", color=Fore.YELLOW)
        log_data.setdefault("maps", {})

    entry = {"rows": list(rows)}
    if result is not None:
        entry["result"] = result.to_dict()
    if error is not None:
        entry["error"] = {"kind": error.kind, "message": str(error)}
    log_data["maps"][name] = entry

    with open(log_file, 'w') as f:
        json.dump(log_data, f, indent=2)
    log_with_time(f"Traversal of {name} logged to {log_file}", color=Fore.GREEN)
    return log_file
