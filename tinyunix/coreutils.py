"""The cat, echo, wc and ls commands."""

import os
import stat as _stat
import sys

from .printf import format_message

DIRSIZ = 14

T_DIR = 1
T_FILE = 2
T_DEVICE = 3

_CHUNK = 512
_PATH_BUF = 512
_WHITESPACE = frozenset(b" \r\t\n\v\0")


def _args(argv):
    return sys.argv[1:] if argv is None else list(argv)


def cat(stream, out):
    """Copy a binary stream to ``out``; raises OSError on read or write failure."""
    while True:
        try:
            chunk = stream.read(_CHUNK)
        except OSError as exc:
            raise OSError("cat: read error") from exc
        if not chunk:
            return
        try:
            written = out.write(chunk)
        except OSError as exc:
            raise OSError("cat: write error") from exc
        if written is not None and written != len(chunk):
            raise OSError("cat: write error")


def cat_main(argv=None):
    """Concatenate files, or standard input, to standard output."""
    args = _args(argv)
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        if not args:
            cat(sys.stdin.buffer, out)
            return 0
        for path in args:
            try:
                stream = open(path, "rb")
            except OSError:
                sys.stderr.write(f"cat: cannot open {path}\n")
                return 1
            with stream:
                cat(stream, out)
        return 0
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    finally:
        out.flush()


def echo(args):
    """Return the arguments joined by blanks and ended by a newline; nothing if none."""
    return " ".join(args) + "\n" if args else ""


def echo_main(argv=None):
    """Print the arguments."""
    sys.stdout.write(echo(_args(argv)))
    return 0


def wc(stream):
    """Count (lines, words, bytes) in a binary stream."""
    lines = words = chars = 0
    inword = False
    while chunk := stream.read(_CHUNK):
        chars += len(chunk)
        lines += chunk.count(b"\n")
        for byte in chunk:
            if byte in _WHITESPACE:
                inword = False
            elif not inword:
                words += 1
                inword = True
    return lines, words, chars


def _print_counts(stream, name):
    lines, words, chars = wc(stream)
    sys.stdout.write(format_message("%d %d %d %s\n", lines, words, chars, name))


def wc_main(argv=None):
    """Count lines, words and bytes of files, or of standard input."""
    args = _args(argv)
    try:
        if not args:
            _print_counts(sys.stdin.buffer, "")
            return 0
        for path in args:
            try:
                stream = open(path, "rb")
            except OSError:
                sys.stdout.write(f"wc: cannot open {path}\n")
                return 1
            with stream:
                _print_counts(stream, path)
    except OSError:
        sys.stdout.write("wc: read error\n")
        return 1
    return 0


def fmtname(path):
    """Return the last path component, blank-padded to DIRSIZ when shorter."""
    name = path.rsplit("/", 1)[-1]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def _file_info(path):
    st = os.stat(path)
    if _stat.S_ISDIR(st.st_mode):
        kind = T_DIR
    elif _stat.S_ISREG(st.st_mode):
        kind = T_FILE
    else:
        kind = T_DEVICE
    return kind, st.st_ino, st.st_size


def _dir_entries(path):
    yield "."
    yield ".."
    yield from sorted(os.listdir(path))


def ls(path, out=None):
    """List a file, or every entry of a directory, as name, type, inode and size."""
    if out is None:
        out = sys.stdout
    try:
        kind, ino, size = _file_info(path)
        entries = _dir_entries(path) if kind == T_DIR else ()
        if kind == T_DIR:
            entries = list(entries)
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return
    if kind == T_FILE:
        out.write(format_message("%s %d %d %l\n", fmtname(path), kind, ino, size))
    elif kind == T_DIR:
        if len(path) + 1 + DIRSIZ + 1 > _PATH_BUF:
            out.write("ls: path too long\n")
            return
        for name in entries:
            entry = f"{path}/{name}"
            try:
                info = _file_info(entry)
            except OSError:
                out.write(f"ls: cannot stat {entry}\n")
                continue
            out.write(format_message("%s %d %d %d\n", fmtname(entry), *info))


def ls_main(argv=None):
    """List the given paths, or the current directory."""
    args = _args(argv)
    for path in args or ["."]:
        ls(path)
    return 0