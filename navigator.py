import argparse
import time
import utils
from utils import log_with_time, vlog
from colorama import Fore
from grid import Grid, load_grid, print_grid
from errors import NavigationError
import path_cache
from path_cache import cached_traverse, print_cache_summary
from sample_maps import VALID_MAPS, INVALID_MAPS


def process_map(lines, name="map", show_map=False, diagnose=False, log_result=False, max_steps=None):
    """Walk one map and print ``Letters: ..., Path: ...`` or an error line.

    Returns the TraversalResult, or None when the map is malformed.
    """
    grid = lines if isinstance(lines, Grid) else Grid(lines)
    t0 = time.time()
    try:
        result = cached_traverse(grid.rows, max_steps=max_steps)
    except NavigationError as e:
        vlog(f"{name}: walk failed with {e.kind}", t0)
        if show_map:
            print_grid(grid)
        if diagnose:
            log_with_time(f"{name}: {e.kind}: {e}", color=Fore.RED)
            print(f"Error: {e.kind}: {e}")
        else:
            print("Error")
        if log_result:
            utils.log_traversal_to_file(name, grid.rows, error=e)
        return None

    vlog(f"{name}: {result.steps} steps", t0)
    if show_map:
        print_grid(grid, result.trail)
    print(f"Letters: {result.letters}, Path: {result.path}")
    if log_result:
        utils.log_traversal_to_file(name, grid.rows, result=result)
    return result


def run_navigator(argv=None):
    parser = argparse.ArgumentParser(description="Walk ASCII maps from @ to x, collecting letters")
    parser.add_argument("maps", nargs="*", help="Map files to walk ('-' reads standard input)")
    parser.add_argument("--samples", action="store_true", help="Walk the built-in sample maps, valid and invalid")
    parser.add_argument("--show-map", action="store_true", help="Print each map with the walked cells highlighted")
    parser.add_argument("--diagnose", action="store_true", help="Print the kind of error instead of a plain 'Error'")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help=f"Give up after this many steps (default: {utils.MAX_STEPS})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--no-cache", action="store_true", help="Disable traversal caching")
    parser.add_argument("--log-result", action="store_true", help="Save each map and its outcome to a dated JSON log file")
    args = parser.parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    if args.max_steps is not None:
        if args.max_steps < 1:
            parser.error("--max-steps must be at least 1")
        utils.MAX_STEPS = args.max_steps

    # Pass cache disable flag to path_cache
    path_cache.CACHE_DISABLED = args.no_cache

    jobs = []
    if args.samples:
        jobs.extend(VALID_MAPS.items())
        jobs.extend(INVALID_MAPS.items())
    for map_path in args.maps:
        try:
            grid = load_grid(map_path)
        except OSError as e:
            log_with_time(f"Could not read map file {map_path}: {e}", color=Fore.RED)
            jobs.append((map_path, None))
            continue
        jobs.append((map_path, grid))

    if not jobs:
        parser.print_usage()
        log_with_time("No maps given; pass map files or --samples", color=Fore.YELLOW)
        return 2

    failures = 0
    for name, lines in jobs:
        if lines is None:
            failures += 1
            continue
        if len(jobs) > 1:
            print(f"{name}:")
        result = process_map(
            lines,
            name=name,
            show_map=args.show_map,
            diagnose=args.diagnose,
            log_result=args.log_result,
        )
        if result is None:
            failures += 1

    if utils.VERBOSE and not args.no_cache:
        print_cache_summary()

    total_elapsed = time.time() - utils.start_time
    color = Fore.GREEN if not failures else Fore.YELLOW
    log_with_time(f"Walked {len(jobs)} map(s), {failures} failed in {total_elapsed:.3f}s", color=color)
    return 1 if failures else 0
