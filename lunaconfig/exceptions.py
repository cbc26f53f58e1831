from lunaconfig.utils import StrAndRepr, line_and_column


class LunaError(Exception):
    """Base class for everything lunaconfig reports"""


class SourceUnavailable(StrAndRepr, LunaError):
    """The named configuration file couldn't be opened or decoded."""

    def __init__(self, filename, reason=None):
        self.filename = filename
        self.reason = reason

    def __str__(self):
        if self.reason is None:
            return u"Error opening file '%s'." % self.filename
        return u"Error opening file '%s': %s" % (self.filename, self.reason)


class ParseError(StrAndRepr, LunaError):
    """Some construct in the text didn't parse.

    Parsing goes on after one of these is recorded; the construct it
    describes is left empty or half-filled.

    """
    #: What was being parsed, for the message
    construct = 'value'

    def __init__(self, text, pos=-1, filename='<string>', detail=''):
        self.text = text
        self.pos = pos
        self.filename = filename
        self.detail = detail

    def line(self):
        """Return the 1-based line number where the error occurred."""
        return line_and_column(self.text, self.pos)[0]

    def column(self):
        """Return the 1-based column where the error occurred."""
        return line_and_column(self.text, self.pos)[1]

    def __str__(self):
        return u"Error parsing %s in file '%s' at line %s, column %s%s: '%s'" % (
            self.construct,
            self.filename,
            self.line(),
            self.column(),
            (' (%s)' % self.detail) if self.detail else '',
            self.text[self.pos:self.pos + 20])


class MalformedArray(ParseError):
    """Something other than ``,`` or ``]`` followed an array element, or the
    input ran out inside an array."""
    construct = 'array'


class MalformedObject(ParseError):
    """Text inside an object didn't make a ``key:value`` pair."""
    construct = 'object'


class MalformedString(ParseError):
    """A string had no closing quote."""
    construct = 'string'


class MalformedBoolean(ParseError):
    construct = 'boolean'


class MalformedNumber(ParseError):
    """The numeric scan failed, or something other than a terminator of the
    enclosing context came right after the number."""
    construct = 'number'


class NestingTooDeep(ParseError):
    """Arrays and objects were nested deeper than the parser's
    ``max_depth``."""
    construct = 'value'
