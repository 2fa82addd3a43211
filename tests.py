import unittest
import doctest
from contextlib import redirect_stdout
from io import StringIO
from unittest import mock

import utils
import variadic
import callbacks
import list_operations
import type_factories
import text
import recursion
import memoization
import exercises
import demo


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(utils))
    tests.addTests(doctest.DocTestSuite(variadic))
    tests.addTests(doctest.DocTestSuite(callbacks))
    tests.addTests(doctest.DocTestSuite(list_operations))
    tests.addTests(doctest.DocTestSuite(type_factories))
    tests.addTests(doctest.DocTestSuite(text))
    tests.addTests(doctest.DocTestSuite(recursion))
    tests.addTests(doctest.DocTestSuite(memoization))
    tests.addTests(doctest.DocTestSuite(exercises))

    return tests


class Recorder(object):
    """Callback that remembers what it was called with."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


class MultiplyArgumentsTestCase(unittest.TestCase):

    def test_no_arguments(self):
        self.assertEqual(0, variadic.multiply_arguments())

    def test_single_argument_is_returned_as_is(self):
        self.assertEqual(7, variadic.multiply_arguments(7))
        self.assertEqual(0, variadic.multiply_arguments(0))

    def test_product(self):
        self.assertEqual(24, variadic.multiply_arguments(2, 3, 4))
        self.assertEqual(-6, variadic.multiply_arguments(-1, 2, 3))
        self.assertEqual(0, variadic.multiply_arguments(5, 0, 9))

    def test_unpacked_sequence(self):
        self.assertEqual(120, variadic.multiply_arguments(*range(1, 6)))


class CallbacksTestCase(unittest.TestCase):

    def test_invoke_callback_calls_once_without_arguments(self):
        cb = Recorder()
        self.assertIsNone(callbacks.invoke_callback(cb))
        self.assertEqual([()], cb.calls)

    def test_sum_array(self):
        cb = Recorder()
        self.assertIsNone(callbacks.sum_array([1, 2, 3], cb))
        self.assertEqual([(6,)], cb.calls)

    def test_sum_array_empty(self):
        cb = Recorder()
        callbacks.sum_array([], cb)
        self.assertEqual([(0,)], cb.calls)

    def test_sum_array_accepts_any_iterable(self):
        cb = Recorder()
        callbacks.sum_array((x for x in [1.5, 2.5]), cb)
        self.assertEqual([(4.0,)], cb.calls)

    def test_errors_from_callback_propagate(self):
        def boom(total):
            raise ZeroDivisionError(total)

        with self.assertRaises(ZeroDivisionError):
            callbacks.sum_array([1], boom)

    def test_ignore(self):
        callbacks.sum_array([1, 2], callbacks.ignore)

    def test_callback_must_be_callable(self):
        with self.assertRaises(AssertionError):
            callbacks.invoke_callback("not a function")


class ListOperationsTestCase(unittest.TestCase):

    def test_for_each_in_order(self):
        cb = Recorder()
        self.assertIsNone(list_operations.l_for_each([1, 2, 3], cb))
        self.assertEqual([(1,), (2,), (3,)], cb.calls)

    def test_for_each_empty(self):
        cb = Recorder()
        list_operations.l_for_each([], cb)
        self.assertEqual([], cb.calls)

    def test_map(self):
        self.assertEqual([2, 4, 6], list_operations.l_map([1, 2, 3], lambda x: x * 2))

    def test_map_returns_a_new_list(self):
        original = [3, 1, 2]
        result = list_operations.l_map(original, str)
        self.assertEqual(['3', '1', '2'], result)
        self.assertEqual([3, 1, 2], original)
        self.assertIsNot(original, result)

    def test_map_preserves_length(self):
        self.assertEqual(4, len(list_operations.l_map([None] * 4, lambda x: x)))


class TypeFactoriesTestCase(unittest.TestCase):

    def setUp(self):
        self.User = type_factories.user_type_factory()

    def test_fields_from_options(self):
        options = {'username': 'ghopper', 'name': 'Grace', 'email': 'grace@example.com', 'password': 'cobol'}
        grace = self.User(options)
        self.assertEqual('ghopper', grace.username)
        self.assertEqual('Grace', grace.name)
        self.assertEqual('grace@example.com', grace.email)
        self.assertEqual('cobol', grace.password)
        self.assertIsInstance(grace, self.User)

    def test_say_hi_uses_instance_name(self):
        self.assertEqual('Hello, my name is Grace', self.User(name='Grace').say_hi())
        self.assertEqual('Hello, my name is Ada', self.User(name='Ada').say_hi())

    def test_method_is_shared_between_instances(self):
        self.assertNotIn('say_hi', vars(self.User(name='Ada')))
        self.assertIn('say_hi', vars(self.User))

    def test_unknown_field(self):
        with self.assertRaises(TypeError):
            self.User({'nickname': 'ada'})

    def test_each_factory_call_gives_a_new_class(self):
        Other = type_factories.user_type_factory()
        self.assertIsNot(self.User, Other)
        self.assertEqual('User', Other.__name__)

    def test_add_prototype_method_to_existing_instances(self):
        ada = self.User(name='Ada')
        type_factories.add_prototype_method(self.User)
        self.assertEqual('Hello World!', ada.say_hi())
        self.assertEqual('Hello World!', self.User(name='Grace').say_hi())

    def test_add_prototype_method_on_plain_class(self):
        class Car(object):
            pass

        type_factories.add_prototype_method(Car)
        self.assertEqual('Hello World!', Car().say_hi())

    def test_add_prototype_method_leaves_other_classes_alone(self):
        Other = type_factories.user_type_factory()
        type_factories.add_prototype_method(self.User)
        self.assertEqual('Hello, my name is Ada', Other(name='Ada').say_hi())


class TextTestCase(unittest.TestCase):

    def test_reverse_string(self):
        self.assertEqual('cba', text.reverse_string('abc'))
        self.assertEqual('a', text.reverse_string('a'))

    def test_reversible_str(self):
        ReversibleStr = text.add_reverse_string()
        reversed_ = ReversibleStr('hello world').reverse()
        self.assertEqual('dlrow olleh', reversed_)
        self.assertIsInstance(reversed_, ReversibleStr)

    def test_builtin_str_is_not_touched(self):
        text.add_reverse_string()
        self.assertFalse(hasattr('abc', 'reverse'))


class FactorialTestCase(unittest.TestCase):

    def test_base_case(self):
        self.assertEqual(1, recursion.n_factorial(1))

    def test_values(self):
        self.assertEqual(2, recursion.n_factorial(2))
        self.assertEqual(120, recursion.n_factorial(5))
        self.assertEqual(3628800, recursion.n_factorial(10))

    def test_non_positive(self):
        for n in [0, -1, -3]:
            with self.assertRaises(ValueError):
                recursion.n_factorial(n)

    def test_non_integer(self):
        for n in [2.5, 3.0, "3", None, True]:
            with self.assertRaises(TypeError):
                recursion.n_factorial(n)


class CacheFunctionTestCase(unittest.TestCase):

    def setUp(self):
        self.calls = []

        def square(x):
            self.calls.append(x)
            return x * x

        self.cached_square = memoization.cache_function(square)

    def test_same_input_computes_once(self):
        self.assertEqual(25, self.cached_square(5))
        self.assertEqual(25, self.cached_square(5))
        self.assertEqual([5], self.calls)

    def test_new_input_computes_again(self):
        self.assertEqual(25, self.cached_square(5))
        self.assertEqual(36, self.cached_square(6))
        self.assertEqual([5, 6], self.calls)

    def test_results_are_kept_per_input(self):
        for value in [5, 6, 5, 6, 7, 5]:
            self.cached_square(value)
        self.assertEqual([5, 6, 7], self.calls)
        self.assertEqual(36, self.cached_square(6))

    def test_wrappers_do_not_share_results(self):
        other = memoization.cache_function(lambda x: -x)
        self.assertEqual(25, self.cached_square(5))
        self.assertEqual(-5, other(5))

    def test_none_result_is_remembered(self):
        cb = Recorder(result=None)
        cached = memoization.cache_function(cb)
        self.assertIsNone(cached('a'))
        self.assertIsNone(cached('a'))
        self.assertEqual([('a',)], cb.calls)

    def test_errors_propagate_and_are_not_remembered(self):
        attempts = []

        def flaky(x):
            attempts.append(x)
            if len(attempts) == 1:
                raise RuntimeError("first attempt fails")
            return x

        cached = memoization.cache_function(flaky)
        with self.assertRaises(RuntimeError):
            cached(1)
        self.assertEqual(1, cached(1))
        self.assertEqual(1, cached(1))
        self.assertEqual([1, 1], attempts)

    def test_unhashable_input(self):
        with self.assertRaises(TypeError):
            self.cached_square([1, 2])
        self.assertEqual([], self.calls)

    def test_logs_hits_and_misses(self):
        with self.assertLogs('memoization', level='DEBUG') as cm:
            self.cached_square(5)
            self.cached_square(5)

        self.assertEqual(2, len(cm.output))
        self.assertIn('cache miss for 5', cm.output[0])
        self.assertIn('cache hit for 5', cm.output[1])


class ExercisesTestCase(unittest.TestCase):

    def test_all_names_are_exported(self):
        for name in exercises.EXERCISE_NAMES:
            self.assertTrue(callable(getattr(exercises, name)), name)

    def test_exported_functions(self):
        self.assertIs(recursion.n_factorial, exercises.n_factorial)
        self.assertIs(list_operations.l_map, exercises.map)
        self.assertIs(memoization.cache_function, exercises.cache_function)


class DemoTestCase(unittest.TestCase):

    def run_demo(self, *args):
        out = StringIO()
        with mock.patch.object(demo, 'argv', ['demo.py'] + list(args)), redirect_stdout(out):
            demo.main()
        return out.getvalue()

    def test_every_exercise_has_a_demo(self):
        self.assertEqual(set(exercises.EXERCISE_NAMES), set(demo.DEMOS))

    def test_cache_function(self):
        self.assertEqual("computing 5\n25\n25\ncomputing 6\n36\n", self.run_demo('cache_function'))

    def test_n_factorial(self):
        self.assertEqual("1 1\n3 6\n5 120\n", self.run_demo('n_factorial'))

    def test_verbose_flag(self):
        with mock.patch.object(demo.logging, 'basicConfig') as basic_config:
            self.assertEqual("0\n7\n24\n", self.run_demo('-v', 'multiply_arguments'))
        self.assertEqual(demo.logging.DEBUG, basic_config.call_args[1]['level'])

    def test_unknown_exercise(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_demo('no_such_exercise')
        self.assertEqual(1, cm.exception.code)

    def test_no_arguments(self):
        with self.assertRaises(SystemExit):
            self.run_demo()


if __name__ == '__main__':
    unittest.main()
