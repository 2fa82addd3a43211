"""
Classes are values too: they can be constructed inside a function and returned from it, and they can be changed
after the fact (all instances share the methods defined on their class, so a method added to the class is
immediately visible on every instance).

>>> User = user_type_factory()
>>> ada = User({'username': 'ada', 'name': 'Ada', 'email': 'ada@example.com', 'password': 'secret'})
>>> ada.username, ada.email
('ada', 'ada@example.com')
>>> ada.say_hi()
'Hello, my name is Ada'
>>> User
<class 'type_factories.User'>

Keyword arguments work too; fields that are not provided are None:
>>> User(name='Grace').say_hi()
'Hello, my name is Grace'
>>> User(name='Grace').password is None
True

Each call to the factory produces a new, unrelated class:
>>> user_type_factory() is user_type_factory()
False

>>> add_prototype_method(User)
>>> ada.say_hi()
'Hello World!'
"""

from utils import pmts, pmts_or_none

USER_FIELDS = ('username', 'name', 'email', 'password')


def user_type_factory():
    """Creates the `User` class; instances are created from an options dict (or keyword arguments) with the fields
    username, name, email and password."""

    class UserPrototype(object):
        def __init__(self, options=None, **kwargs):
            pmts_or_none(options, dict)

            values = dict(options or {})
            values.update(kwargs)

            unknown = set(values) - set(USER_FIELDS)
            if unknown:
                raise TypeError("%s got unexpected field(s): %s" % (User.__name__, ", ".join(sorted(unknown))))

            for field in USER_FIELDS:
                value = values.get(field)
                pmts_or_none(value, str, "field '%s'" % field)
                setattr(self, field, value)

        def __repr__(self):
            return "<%s %s>" % (User.__name__, self.username)

        def say_hi(self):
            return "Hello, my name is %s" % self.name

    # The local name `User` is looked up in the methods above when they are called, i.e. after the assignment below.
    User = type("User", (object,), _class_body(UserPrototype))
    return User


def _class_body(prototype):
    # the prototype's own __dict__/__weakref__ descriptors only apply to instances of the prototype itself
    return {k: v for k, v in prototype.__dict__.items() if k not in ('__dict__', '__weakref__')}


def add_prototype_method(Constructor):
    """Adds (or replaces) `say_hi` on the given class, in place."""
    pmts(Constructor, type)

    def say_hi(self):
        return "Hello World!"

    Constructor.say_hi = say_hi
