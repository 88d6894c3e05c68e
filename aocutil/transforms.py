"""
Line-oriented transforms of raw puzzle input to something more useful for
speed-solving. Every converter here accepts one line of text (without its
newline) and returns the 'massaged' value, raising ValueError or
ArithmeticError if the line can't be converted.

Numbers must fill the whole line: surrounding whitespace and `_` digit
separators are rejected, even though `int`, `float` and `Decimal` would
accept them. The exception is `base=0`, where underscores are allowed as in
Python literals.
"""

__all__ = ["raw_lines", "lines", "scan", "int64", "big_int", "float64", "decimal"]

from decimal import Decimal

from .exceptions import ParseError


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def raw_lines(stream):
    """
    Iterate the lines of a binary stream as bytes. Lines end at b"\\n", which is
    dropped along with a b"\\r" immediately before it. A lone b"\\r" is data.
    """
    for line in stream:
        line = line.removesuffix(b"\n")
        yield line.removesuffix(b"\r")


def lines(stream):
    """
    The lines of a binary stream as text. Bytes which aren't valid UTF-8 are kept
    as lone surrogates, so this never fails on odd input.
    """
    return [line.decode("utf-8", "surrogateescape") for line in raw_lines(stream)]


def scan(stream, convert=str):
    """
    Decode and convert every line of the stream, returning the list of values.
    Stops at the first line that fails to decode or convert and raises ParseError,
    which carries the 0-based index of the bad line and the values parsed so far.
    """
    result = []
    for index, raw in enumerate(raw_lines(stream)):
        try:
            val = convert(raw.decode("utf-8"))
        except (ValueError, ArithmeticError) as err:
            # UnicodeDecodeError is a ValueError too
            line = raw.decode("utf-8", "surrogateescape")
            raise ParseError(index, line, result, err) from err
        result.append(val)
    return result


def _check_number(line, underscores=False):
    if line != line.strip() or (not underscores and "_" in line):
        raise ValueError(f"invalid number: {line!r}")


def int64(line, base=10):
    val = big_int(line, base)
    if not INT64_MIN <= val <= INT64_MAX:
        raise ValueError(f"value out of range for int64: {line!r}")
    return val


def big_int(line, base=10):
    _check_number(line, underscores=base == 0)
    return int(line, base)


def float64(line):
    _check_number(line)
    return float(line)


def decimal(line):
    _check_number(line)
    return Decimal(line)
