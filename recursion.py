"""
A function that calls itself; another way of looping.

>>> n_factorial(1)
1
>>> n_factorial(3)
6
>>> n_factorial(5)
120

The factorial is only defined here for positive integers; no convention for 0! is assumed:
>>> n_factorial(0)
Traceback (most recent call last):
ValueError: n_factorial is defined for positive integers only; got 0
>>> n_factorial(2.5)
Traceback (most recent call last):
TypeError: n_factorial is defined for positive integers only; got value of type 'float'
"""


def n_factorial(n):
    # bool is a subclass of int, but True! is not something we want to support
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n_factorial is defined for positive integers only; got value of type '%s'" % type(n).__name__)

    if n < 1:
        raise ValueError("n_factorial is defined for positive integers only; got %s" % n)

    if n == 1:  # base case, stops the recursion
        return 1

    return n * n_factorial(n - 1)
