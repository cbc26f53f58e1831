"""The recursive-descent parser that turns configuration text into values

There is no tokenizer: ``_parse_value()`` peeks at one character to pick a
production, and the productions call back into it for nested values::

    value   = object / array / string / bool / number
    object  = "$" (pair ("," pair)* ","?)?
    pair    = key ":" value
    array   = "[" (value ("," value)* ","?)? "]"
    string  = '"' ~'[^"]*' '"'
    bool    = "true" / "false"
    number  = "-"? digits ("." digits)?

A number or boolean has to be followed by something its enclosing context
allows there: the end of the text at the top level, ``,`` or ``]`` in an
array, and ``,`` or whatever ends the object inside an object.

Errors don't stop the parse. Each one is logged, recorded on
``Parser.errors``, and the offending construct is left empty or half-filled.
Pass ``strict=True`` to get the first one raised instead.

"""
import logging

import regex

from lunaconfig.exceptions import (SourceUnavailable, MalformedArray,
    MalformedObject, MalformedString, MalformedBoolean, MalformedNumber,
    NestingTooDeep)
from lunaconfig.reader import EOF, Reader
from lunaconfig.values import Null, Bool, Int, Float, String, Array, Object


__all__ = ['Parser', 'load', 'loads']

logger = logging.getLogger(__name__)

KEY = regex.compile(r'([^:,\[\]$"]*):')
NUMBER = regex.compile(r'-?[0-9]+(?:\.[0-9]+)?')
WORD = regex.compile(r'[A-Za-z]*')

ROOT_TERMINATORS = frozenset([EOF])
ARRAY_TERMINATORS = frozenset([EOF, ',', ']'])

# Each level of nesting costs two stack frames.
DEPTH_LIMIT_DEFAULT = 200


class Parser(object):
    """A parser for one named configuration file

    ::

        parser = Parser('server.luna')
        config = parser.parse()
        if parser.errors:
            ...  # config is partial

    """
    def __init__(self, filename, encoding='utf-8',
                 max_depth=DEPTH_LIMIT_DEFAULT):
        """Construct a parser.

        :arg filename: Path of the file ``parse()`` reads
        :arg encoding: Text encoding of that file
        :arg max_depth: How deeply arrays and objects may nest before the
            parse gives up on the innermost value

        """
        self.filename = filename
        self.encoding = encoding
        self.max_depth = max_depth
        self.errors = []
        self._strict = False

    def parse(self, strict=False):
        """Read my file and return the root ``Value`` of its contents.

        Return ``Null()`` if the file can't be opened or decoded. Whatever
        went wrong is on ``self.errors`` afterward; it's empty after a clean
        parse.

        :arg strict: Raise the first error rather than recording it and
            carrying on

        """
        self.errors = []
        self._strict = strict
        try:
            with open(self.filename, encoding=self.encoding) as source:
                text = source.read()
        except (OSError, UnicodeDecodeError) as exc:
            self._report(SourceUnavailable(self.filename, exc))
            return Null()
        return self._parse_text(text)

    def parse_text(self, text, strict=False):
        """Parse ``text`` as if it were the contents of my file."""
        self.errors = []
        self._strict = strict
        return self._parse_text(text)

    def _parse_text(self, text):
        result = self._parse_value(Reader(text), ROOT_TERMINATORS, 0)
        if not self.errors:
            logger.debug('Parsed %s into a %s.', self.filename, result.type)
        return result

    def _report(self, error):
        logger.error('%s', error)
        self.errors.append(error)
        if self._strict:
            raise error

    def _at_terminator(self, reader, terminators):
        reader.skip_whitespace()
        return reader.peek() in terminators

    def _parse_value(self, reader, terminators, depth):
        reader.skip_whitespace()
        if depth > self.max_depth:
            reader.fail()
            self._report(NestingTooDeep(reader.text, reader.pos, self.filename,
                                        'deeper than %s' % self.max_depth))
            return Null()
        c = reader.peek()
        if c == '$':
            return self._parse_object(reader, terminators, depth)
        if c == '[':
            return self._parse_array(reader, depth)
        if c == '"':
            return self._parse_string(reader)
        if c == 't' or c == 'f':
            return self._parse_bool(reader, terminators)
        return self._parse_number(reader, terminators)

    def _parse_object(self, reader, terminators, depth):
        """Parse ``key:value`` pairs until one isn't followed by a comma.

        Values inside may also end at a comma, on top of whatever ends the
        object itself.

        """
        reader.ignore()
        members = {}
        inner = terminators | frozenset(',')
        while True:
            reader.skip_whitespace()
            key = reader.match(KEY)
            if key is None:
                # An empty object, a trailing comma, or junk.
                if reader.peek() not in terminators:
                    self._report(MalformedObject(
                        reader.text, reader.pos, self.filename,
                        'expected key:value'))
                break
            members[key.group(1).strip()] = self._parse_value(
                reader, inner, depth + 1)
            reader.skip_whitespace()
            c = reader.peek()
            if c == ',':
                reader.ignore()
                continue
            if c not in terminators:
                self._report(MalformedObject(
                    reader.text, reader.pos, self.filename,
                    'expected , after a value'))
            break
        return Object(members)

    def _parse_array(self, reader, depth):
        start = reader.pos
        reader.ignore()
        items = []
        while True:
            reader.skip_whitespace()
            c = reader.peek()
            if c == ']':
                break
            if reader.at_end():
                self._report(MalformedArray(reader.text, start, self.filename,
                                            'unterminated'))
                return Array(items)
            items.append(
                self._parse_value(reader, ARRAY_TERMINATORS, depth + 1))
            reader.skip_whitespace()
            c = reader.peek()
            if c == ',':
                reader.ignore()
            elif c == ']':
                break
            else:
                self._report(MalformedArray(reader.text, reader.pos,
                                            self.filename, 'expected , or ]'))
                return Array(items)
        reader.ignore()
        return Array(items)

    def _parse_string(self, reader):
        start = reader.pos
        reader.ignore()
        content, closed = reader.read_until('"')
        if not closed:
            self._report(MalformedString(reader.text, start, self.filename,
                                         'no closing quote'))
        return String(content)

    def _parse_bool(self, reader, terminators):
        start = reader.pos
        word = reader.match(WORD)
        word = word.group() if word is not None else ''
        if word in ('true', 'false') and self._at_terminator(reader, terminators):
            return Bool(word == 'true')
        self._report(MalformedBoolean(reader.text, start, self.filename))
        return Bool(False)

    def _parse_number(self, reader, terminators):
        """Scan a decimal number and pick ``Int`` or ``Float`` for it.

        It's an ``Int`` whenever its value is integral, so ``2.0`` is
        ``Int(2)``. On failure, the reader is failed too, and nothing more
        gets read from it.

        """
        start = reader.pos
        number = reader.match(NUMBER)
        if number is None:
            self._fail_number(reader, start, 'not a number')
            return Null()
        if not self._at_terminator(reader, terminators):
            self._fail_number(reader, reader.pos, 'unexpected text after number')
            return Null()
        literal = number.group()
        if '.' not in literal:
            return Int(int(literal))
        value = float(literal)
        if value.is_integer():
            return Int(int(value))
        return Float(value)

    def _fail_number(self, reader, pos, detail):
        reader.fail()
        self._report(MalformedNumber(reader.text, pos, self.filename, detail))


def load(filename, strict=False, encoding='utf-8'):
    """Parse the named file and return its root ``Value``."""
    return Parser(filename, encoding=encoding).parse(strict=strict)


def loads(text, strict=False, name='<string>'):
    """Parse configuration text and return its root ``Value``.

    :arg name: What to call the text in error messages

    """
    return Parser(name).parse_text(text, strict=strict)
