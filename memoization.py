"""
Memoization: remembering the result of a computation, keyed by its input, so that asking the same question twice
does not mean computing the answer twice.

The remembered results live in a closure: the returned function keeps access to the `results` dict of the call to
`cache_function` that created it, long after that call has returned. Every wrapper gets its own dict; nothing is
shared between wrappers.

A single slot (remembering only "the last result") is not enough: it would return the answer for 5 when asked about
6. Hence the dict.

Cache invalidation is a non-issue here, as long as the wrapped function is pure (the same input always gives the
same output). There is no replacement policy either: the dict grows with every distinct input.

>>> calls = []
>>> def square(x):
...     calls.append(x)
...     return x * x
...
>>> cached_square = cache_function(square)
>>> cached_square(5)
25
>>> cached_square(5)
25
>>> calls
[5]
>>> cached_square(6)
36
>>> calls
[5, 6]

Inputs are used as dict keys, so they must be hashable:
>>> cached_square([1, 2])
Traceback (most recent call last):
TypeError: cache_function requires hashable arguments; got value of type 'list'
"""

import logging

from utils import pmts_callable

logger = logging.getLogger(__name__)


def cache_function(cb):
    # cb :: function that takes a single (hashable) argument
    pmts_callable(cb, "cache_function")
    results = {}

    def cached(value):
        try:
            hash(value)
        except TypeError:
            raise TypeError("cache_function requires hashable arguments; got value of type '%s'" %
                            type(value).__name__) from None

        # membership rather than `results.get(value)`: None is a perfectly fine result to remember
        if value in results:
            logger.debug("cache hit for %r", value)
            return results[value]

        logger.debug("cache miss for %r", value)
        result = cb(value)  # if this raises, nothing is remembered
        results[value] = result
        return result

    return cached
