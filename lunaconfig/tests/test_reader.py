import regex

from lunaconfig.reader import EOF, Reader


def test_peek_doesnt_consume():
    r = Reader('ab')
    assert r.peek() == 'a'
    assert r.peek() == 'a'
    r.ignore()
    assert r.peek() == 'b'
    r.ignore()
    assert r.peek() == EOF
    assert r.at_end()
    r.ignore()  # past the end is a no-op
    assert r.pos == 2


def test_match():
    r = Reader('123abc')
    m = r.match(regex.compile('[0-9]+'))
    assert m.group() == '123'
    assert r.pos == 3
    assert r.match(regex.compile('[0-9]+')) is None
    assert r.pos == 3


def test_skip_whitespace():
    r = Reader(' \n\t x')
    r.skip_whitespace()
    assert r.peek() == 'x'


def test_read_until():
    r = Reader('key:rest')
    assert r.read_until(':') == ('key', True)
    assert r.peek() == 'r'
    assert r.read_until('"') == ('rest', False)
    assert r.at_end()


def test_failed_reader_looks_exhausted():
    r = Reader('still here')
    r.fail()
    assert r.peek() == EOF
    assert r.match(regex.compile('.*')) is None
    assert r.read_until('h') == ('', False)
    r.ignore()
    assert r.pos == 0
