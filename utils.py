"""
>>> pmts(3, int)
>>> pmts("3", int)
Traceback (most recent call last):
AssertionError: Expected value of type 'int' but is type 'str'
>>> pmts_or_none(None, str)
>>> pmts_callable(len)
>>> pmts_callable(42, "callback for sum_array")
Traceback (most recent call last):
AssertionError: Expected a callable but got value of type 'int'; callback for sum_array
"""


def _extra(extra_information):
    return "" if not extra_information else "; %s" % extra_information


def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__,
        type(v).__name__,
        _extra(extra_information),
        )


def pmts_or_none(v, type_, extra_information=""):
    """Poor man's type system; value may be None"""
    if v is not None:
        pmts(v, type_, extra_information)


def pmts_callable(f, extra_information=""):
    """Poor man's type system, for functions that are passed around as values"""
    assert callable(f), "Expected a callable but got value of type '%s'%s" % (
        type(f).__name__,
        _extra(extra_information),
        )
