"""General tools which don't depend on other parts of lunaconfig"""

import regex


WHITESPACE = regex.compile(r'\s*')


class StrAndRepr(object):
    """Mix-in to add a ``__repr__`` which returns the value of ``__str__``"""

    __slots__ = []

    def __repr__(self):
        return self.__str__()


def line_and_column(text, pos):
    """Return the 1-based (line, column) of ``pos`` within ``text``."""
    line = text.count('\n', 0, pos) + 1
    column = pos - (text.rfind('\n', 0, pos) + 1) + 1
    return line, column
