# path_cache.py
# Remembers finished walks so the same map given twice on one command line
# is only walked once. Keys are the exact rows plus the step budget.

from collections import OrderedDict

import utils
from walker import traverse

CACHE_DISABLED = False
MAX_CACHE_SIZE = 1000


class TraversalCache:
    """
    Bounded, least-recently-used store of TraversalResults.
      - get(key) -> result or None, counting a hit or a miss
      - put(key, result), evicting the oldest entry past ``maxsize``
    Malformed maps are never stored.
    """

    def __init__(self, maxsize=MAX_CACHE_SIZE):
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self.lookups = {}  # key -> times asked, kept only when verbose
        self._entries = OrderedDict()

    def get(self, key):
        if utils.VERBOSE:
            self.lookups[key] = self.lookups.get(key, 0) + 1
        result = self._entries.get(key)
        if result is None:
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return result

    def put(self, key, result):
        self._entries[key] = result
        self._entries.move_to_end(key)
        while len(self._entries) > self.maxsize:
            self._entries.popitem(last=False)

    def clear(self):
        self._entries.clear()
        self.lookups.clear()
        self.hits = self.misses = 0

    def __contains__(self, key):
        return key in self._entries

    def __len__(self):
        return len(self._entries)


_default_cache = TraversalCache()


def cache_key(rows, max_steps=None):
    if max_steps is None:
        max_steps = utils.MAX_STEPS
    return (tuple(rows), max_steps)


def cached_traverse(rows, max_steps=None, cache=None):
    """Walk a map, reusing the result of an identical earlier walk.

    A malformed map raises every time it is walked. With CACHE_DISABLED
    set, the cache is bypassed entirely.
    """
    if CACHE_DISABLED:
        return traverse(tuple(rows), max_steps=max_steps)

    if cache is None:
        cache = _default_cache
    key = cache_key(rows, max_steps)
    result = cache.get(key)
    if result is None:
        result = traverse(key[0], max_steps=key[1])
        cache.put(key, result)
    return result


def print_cache_summary(cache=None):
    if cache is None:
        cache = _default_cache
    repeated = [k for k, c in cache.lookups.items() if c > 1]
    print(f"[CACHE SUMMARY] Distinct maps looked up: {len(cache.lookups)}")
    print(f"[CACHE SUMMARY] Maps looked up more than once: {len(repeated)}")
    print(f"[CACHE SUMMARY] Cached walks: {len(cache)}")
    print(f"[CACHE SUMMARY] Actual cache hits: {cache.hits}")
    print(f"[CACHE SUMMARY] Actual cache misses: {cache.misses}")
