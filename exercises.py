"""
Single point of access for all exercises, under their exercise names.

>>> import exercises
>>> exercises.map([1, 2, 3], lambda x: x + 1)
[2, 3, 4]
>>> exercises.get_user_constructor()(name='Ada').say_hi()
'Hello, my name is Ada'
"""

from variadic import multiply_arguments
from callbacks import invoke_callback, sum_array
from list_operations import l_for_each as for_each, l_map as map
from type_factories import user_type_factory as get_user_constructor, add_prototype_method
from text import add_reverse_string
from recursion import n_factorial
from memoization import cache_function

EXERCISE_NAMES = [
    'multiply_arguments',
    'invoke_callback',
    'sum_array',
    'for_each',
    'map',
    'get_user_constructor',
    'add_prototype_method',
    'add_reverse_string',
    'n_factorial',
    'cache_function',
]
