"""A grep supporting the ^ . * $ operators."""

import sys

_CHUNK = 1024


def match(re, text):
    """Return whether ``re`` matches anywhere in ``text``."""
    if re.startswith("^"):
        return match_here(re[1:], text)
    return any(match_here(re, text[i:]) for i in range(len(text) + 1))


def match_here(re, text):
    """Return whether ``re`` matches at the beginning of ``text``."""
    if not re:
        return True
    if len(re) > 1 and re[1] == "*":
        return match_star(re[0], re[2:], text)
    if re == "$":
        return not text
    if text and re[0] in (".", text[0]):
        return match_here(re[1:], text[1:])
    return False


def match_star(c, re, text):
    """Return whether ``c*`` followed by ``re`` matches at the start of ``text``."""
    i = 0
    while True:
        if match_here(re, text[i:]):
            return True
        if i < len(text) and (text[i] == c or c == "."):
            i += 1
        else:
            return False


def _lines(stream):
    """Yield the newline-terminated lines of a text stream; a final partial line is dropped."""
    pending = ""
    while chunk := stream.read(_CHUNK):
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"


def grep(pattern, stream):
    """Yield each line of ``stream`` that matches ``pattern``, newline included."""
    for line in _lines(stream):
        if match(pattern, line[:-1]):
            yield line


def main(argv=None):
    """Search files, or standard input, for a pattern; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, *paths = argv
    if not paths:
        sys.stdout.writelines(grep(pattern, sys.stdin))
        return 0
    for path in paths:
        try:
            stream = open(path, encoding="utf-8", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {path}\n")
            return 1
        with stream:
            sys.stdout.writelines(grep(pattern, stream))
    return 0


if __name__ == "__main__":
    sys.exit(main())