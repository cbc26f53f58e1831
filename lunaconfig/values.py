"""Values that make up a parsed configuration tree

Parsing spits out a tree of these. Each variant is its own class, and only
the active variant's payload exists on an instance: a ``Bool`` has no string
slot to read by mistake. Check ``type`` (or use ``isinstance``) to find out
which one you have, then read ``value``.

"""
from collections.abc import Mapping

from lunaconfig.utils import StrAndRepr


__all__ = ['Value', 'Null', 'Bool', 'Int', 'Float', 'String', 'Array',
           'Object', 'wrap']


class Value(StrAndRepr):
    """The base of every variant. Not meant to be instantiated directly."""

    __slots__ = []

    #: The discriminant tag, one of the variant class names
    type = None

    def to_python(self):
        """Return the plain Python equivalent of me."""
        return self.value

    # From here down is just stuff for testing and debugging.

    def __eq__(self, other):
        """Support by-value deep comparison with other values for testing."""
        return type(self) is type(other) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __str__(self):
        return u'%s(%r)' % (self.type, self.value)


class Null(Value):
    """The absence of a value, and what an empty or failed parse gives you"""

    __slots__ = []
    type = 'Null'

    @property
    def value(self):
        return None

    def __str__(self):
        return u'Null()'


class Bool(Value):
    __slots__ = ['value']
    type = 'Bool'

    def __init__(self, value=False):
        self.value = bool(value)


class Int(Value):
    __slots__ = ['value']
    type = 'Int'

    def __init__(self, value=0):
        self.value = int(value)


class Float(Value):
    __slots__ = ['value']
    type = 'Float'

    def __init__(self, value=0.0):
        self.value = float(value)


class String(Value):
    __slots__ = ['value']
    type = 'String'

    def __init__(self, value=u''):
        self.value = str(value)


class Array(Value):
    """An ordered sequence of values. Duplicates are fine."""

    __slots__ = ['value']
    type = 'Array'

    def __init__(self, value=None):
        self.value = list(value) if value is not None else []

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def __getitem__(self, index):
        return self.value[index]

    def to_python(self):
        return [v.to_python() for v in self.value]


class Object(Value):
    """A mapping of string keys to values

    Keys come back in the order they were first stored. A repeated key keeps
    its first position and takes the last value written.

    """
    __slots__ = ['value']
    type = 'Object'

    def __init__(self, value=None):
        self.value = dict(value) if value is not None else {}

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def __getitem__(self, key):
        return self.value[key]

    def __contains__(self, key):
        return key in self.value

    def keys(self):
        return self.value.keys()

    def items(self):
        return self.value.items()

    def get(self, key, default=None):
        return self.value.get(key, default)

    def to_python(self):
        return dict((k, v.to_python()) for k, v in self.value.items())


def wrap(obj):
    """Return the ``Value`` variant matching a plain Python object.

    Lists, tuples and mappings are wrapped all the way down. ``bool`` is
    tested before ``int``, since it is a subclass of it.

    """
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, (list, tuple)):
        return Array([wrap(o) for o in obj])
    if isinstance(obj, Mapping):
        return Object((str(k), wrap(v)) for k, v in obj.items())
    raise TypeError("Can't make a configuration value out of %r." % (obj,))
