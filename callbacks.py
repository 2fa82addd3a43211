"""
Functions are values: they can be passed to other functions, which may call them at a moment of their choosing
(a "callback").

>>> def say_hello():
...     print("HELLO")
...
>>> invoke_callback(say_hello)
HELLO

>>> def report(total):
...     print("TOTAL", total)
...
>>> sum_array([1, 2, 3], report)
TOTAL 6
>>> sum_array([], report)
TOTAL 0
"""

from utils import pmts_callable


def ignore(*args):
    """Useful placeholder for callbacks whose results we're not interested in"""
    pass


def invoke_callback(cb):
    # cb :: argless function
    pmts_callable(cb, "invoke_callback")
    cb()


def sum_array(numbers, cb):
    # cb :: function that takes the sum; it is called exactly once, even for an empty list of numbers
    pmts_callable(cb, "sum_array")

    total = 0
    for number in numbers:
        total += number

    cb(total)
