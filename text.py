"""
Reversing text. Rather than teaching the built-in `str` a new trick (which would change it for every piece of code in
the process), the behaviour is offered as a free function and as a method on a dedicated `str` subclass.

>>> reverse_string("hello")
'olleh'
>>> reverse_string("")
''

>>> ReversibleStr = add_reverse_string()
>>> ReversibleStr("stressed").reverse()
'desserts'
>>> ReversibleStr("stressed").reverse().reverse()
'stressed'
>>> hasattr(str, 'reverse')
False
"""

from utils import pmts


def reverse_string(s):
    pmts(s, str)
    return s[::-1]


class ReversibleStr(str):
    """A `str` that knows how to reverse itself; the result is a ReversibleStr again."""

    def reverse(self):
        return ReversibleStr(reverse_string(self))


def add_reverse_string():
    # trivial; returns the extension type, the built-in `str` itself is left as it is
    return ReversibleStr
