"""
Contains some typical operations that visit each element of an existing list and hand it to a function (the
"operation"). Those operations that produce a list always construct a new one; the existing list is left alone.

>>> l_for_each([1, 2, 3], print)
1
2
3

>>> original = [1, 2, 3]
>>> l_map(original, lambda x: x * 2)
[2, 4, 6]
>>> original
[1, 2, 3]
"""

from utils import pmts_callable


def l_for_each(l, cb):
    pmts_callable(cb, "l_for_each")
    for element in l:
        cb(element)


def l_map(l, cb):
    """The resulting list has the same length as `l`, in the same order"""
    pmts_callable(cb, "l_map")
    result = []
    for element in l:
        result.append(cb(element))
    return result
