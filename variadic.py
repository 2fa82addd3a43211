"""
Python collects an undeclared number of positional arguments into a tuple with `*args`; this is our analogy of the
"arguments object" of other languages, except that it's a real sequence from the start.

>>> multiply_arguments()
0
>>> multiply_arguments(7)
7
>>> multiply_arguments(2, 3, 4)
24

Anything that supports `*` will do; with a single argument there is no multiplication at all:
>>> multiply_arguments('ab', 3)
'ababab'
>>> multiply_arguments('ab')
'ab'
"""


def multiply_arguments(*args):
    if len(args) == 0:
        return 0  # by definition; not the empty product

    result = args[0]
    for arg in args[1:]:
        result *= arg
    return result
