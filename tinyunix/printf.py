"""Formatted output understanding %d, %l, %x, %p, %s, %c and %%."""

import sys

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def _to_int32(value):
    value = int(value) & _MASK32
    return value - (1 << 32) if value & (1 << 31) else value


def _printint(value, base, signed):
    xx = _to_int32(value)
    if signed and xx < 0:
        return "-" + _digits(-xx, base)
    return _digits(xx & _MASK32, base)


def _digits(x, base):
    return str(x) if base == 10 else f"{x:X}"


def _char(value):
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(int(value) & 0xFF)


def _string(value):
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def format_message(fmt, *args):
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions are copied through with their percent sign; a
    trailing lone percent sign is dropped.
    """
    remaining = iter(args)

    def take():
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out = []
    pending = False
    for c in fmt:
        if not pending:
            if c == "%":
                pending = True
            else:
                out.append(c)
            continue
        pending = False
        if c == "d":
            out.append(_printint(take(), 10, True))
        elif c == "l":
            out.append(_printint(take(), 10, False))
        elif c == "x":
            out.append(_printint(take(), 16, False))
        elif c == "p":
            out.append(f"0x{int(take()) & _MASK64:016X}")
        elif c == "s":
            out.append(_string(take()))
        elif c == "c":
            out.append(_char(take()))
        elif c == "%":
            out.append("%")
        else:
            out.append("%" + c)
    return "".join(out)


def fprintf(stream, fmt, *args):
    """Write formatted text to ``stream``."""
    stream.write(format_message(fmt, *args))


def printf(fmt, *args):
    """Write formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)