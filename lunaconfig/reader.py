"""A character source with one character of lookahead

The parser never tokenizes ahead. It peeks at the next character to choose a
production, and each production pulls what it needs through one of the scans
here. Scans are anchored regexes matched at the current position, so a scan
either consumes exactly what it matched or nothing at all.

"""
from lunaconfig.utils import WHITESPACE


#: What ``peek()`` returns at the end of the input or once the reader fails
EOF = ''


class Reader(object):
    """A position in a piece of text, plus a sticky fail state

    Once ``fail()`` is called, the reader behaves as if it were exhausted:
    ``peek()`` returns ``EOF`` and every scan comes back empty.

    """
    __slots__ = ['text', 'pos', 'failed']

    def __init__(self, text, pos=0):
        self.text = text
        self.pos = pos
        self.failed = False

    def peek(self):
        """Return the next character without consuming it."""
        if self.failed or self.pos >= len(self.text):
            return EOF
        return self.text[self.pos]

    def ignore(self):
        """Consume one character, if there is one."""
        if not self.failed and self.pos < len(self.text):
            self.pos += 1

    def skip_whitespace(self):
        self.match(WHITESPACE)

    def at_end(self):
        return self.peek() == EOF

    def fail(self):
        self.failed = True

    def match(self, pattern):
        """Consume and return the ``regex`` match of ``pattern`` here.

        Return ``None`` (consuming nothing) if it doesn't match.

        """
        if self.failed:
            return None
        m = pattern.match(self.text, self.pos)
        if m is not None:
            self.pos = m.end()
        return m

    def read_until(self, delimiter):
        """Consume through the next ``delimiter`` and return what came before
        it.

        If the delimiter never shows up, consume the rest of the text and
        return ``(rest, False)``; otherwise return ``(chunk, True)``.

        """
        if self.failed:
            return u'', False
        end = self.text.find(delimiter, self.pos)
        if end == -1:
            chunk, self.pos = self.text[self.pos:], len(self.text)
            return chunk, False
        chunk, self.pos = self.text[self.pos:end], end + len(delimiter)
        return chunk, True
