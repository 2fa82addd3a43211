import logging
from sys import argv, exit

import exercises


def demo_multiply_arguments():
    print(exercises.multiply_arguments())
    print(exercises.multiply_arguments(7))
    print(exercises.multiply_arguments(2, 3, 4))


def demo_invoke_callback():
    exercises.invoke_callback(lambda: print("callback invoked"))


def demo_sum_array():
    exercises.sum_array([1, 2, 3], print)


def demo_for_each():
    exercises.for_each([1, 2, 3], print)


def demo_map():
    print(exercises.map([1, 2, 3], lambda x: x * 2))


def demo_get_user_constructor():
    User = exercises.get_user_constructor()
    print(User({'username': 'ada', 'name': 'Ada', 'email': 'ada@example.com', 'password': 'secret'}).say_hi())


def demo_add_prototype_method():
    User = exercises.get_user_constructor()
    exercises.add_prototype_method(User)
    print(User(name='Ada').say_hi())


def demo_add_reverse_string():
    ReversibleStr = exercises.add_reverse_string()
    print(ReversibleStr("stressed").reverse())


def demo_n_factorial():
    for n in [1, 3, 5]:
        print(n, exercises.n_factorial(n))


def demo_cache_function():
    def square(x):
        print("computing", x)
        return x * x

    cached_square = exercises.cache_function(square)
    for value in [5, 5, 6]:
        print(cached_square(value))


DEMOS = {name: globals()['demo_' + name] for name in exercises.EXERCISE_NAMES}


def usage():
    print("Usage: ", argv[0], "[-v] EXERCISE")
    print("Exercises: ", ", ".join(exercises.EXERCISE_NAMES))
    exit(1)


def main():
    args = argv[1:]

    verbose = '-v' in args
    if verbose:
        args.remove('-v')

    if len(args) != 1 or args[0] not in DEMOS:
        usage()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    DEMOS[args[0]]()


if __name__ == "__main__":
    main()
