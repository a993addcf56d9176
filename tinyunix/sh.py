"""Command-line parser for the shell: pipes, lists, background jobs, redirections and blocks."""

from dataclasses import dataclass, field

from .riscv import O_CREATE, O_RDONLY, O_TRUNC, O_WRONLY

MAXARGS = 10

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass
class ExecCmd:
    """Run a program with its arguments."""

    argv: list = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run ``cmd`` with file descriptor ``fd`` opened on ``file`` with ``mode``."""

    cmd: object
    file: str
    mode: int
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of ``left`` to the input of ``right``."""

    left: object
    right: object


@dataclass
class ListCmd:
    """Run ``left``, wait for it, then run ``right``."""

    left: object
    right: object


@dataclass
class BackCmd:
    """Run ``cmd`` without waiting for it."""

    cmd: object


class _Parser:
    def __init__(self, line):
        self.s = line
        self.pos = 0

    def _skip_blanks(self):
        while self.pos < len(self.s) and self.s[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self, toks):
        self._skip_blanks()
        return self.pos < len(self.s) and self.s[self.pos] in toks

    def token(self):
        """Consume one token; return (kind, word) where kind 'a' is a word and '' the end."""
        self._skip_blanks()
        s = self.s
        start = self.pos
        if start >= len(s):
            kind = ""
        else:
            c = s[start]
            if c in "|();&<":
                kind = c
                self.pos += 1
            elif c == ">":
                kind = ">"
                self.pos += 1
                if self.pos < len(s) and s[self.pos] == ">":
                    kind = "+"
                    self.pos += 1
            else:
                kind = "a"
                while (self.pos < len(s) and s[self.pos] not in WHITESPACE
                       and s[self.pos] not in SYMBOLS):
                    self.pos += 1
        word = s[start:self.pos]
        self._skip_blanks()
        return kind, word

    def line(self):
        cmd = self.pipe()
        while self.peek("&"):
            self.token()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.token()
            cmd = ListCmd(cmd, self.line())
        return cmd

    def pipe(self):
        cmd = self.exec()
        if self.peek("|"):
            self.token()
            cmd = PipeCmd(cmd, self.pipe())
        return cmd

    def redirs(self, cmd):
        while self.peek("<>"):
            tok, _ = self.token()
            kind, name = self.token()
            if kind != "a":
                raise ShellSyntaxError("missing file for redirection")
            if tok == "<":
                cmd = RedirCmd(cmd, name, O_RDONLY, 0)
            elif tok == ">":
                cmd = RedirCmd(cmd, name, O_WRONLY | O_CREATE | O_TRUNC, 1)
            else:
                cmd = RedirCmd(cmd, name, O_WRONLY | O_CREATE, 1)
        return cmd

    def block(self):
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.token()
        cmd = self.line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.token()
        return self.redirs(cmd)

    def exec(self):
        if self.peek("("):
            return self.block()
        cmd = ExecCmd()
        ret = self.redirs(cmd)
        while not self.peek("|)&;"):
            kind, word = self.token()
            if kind == "":
                break
            if kind != "a":
                raise ShellSyntaxError("syntax")
            cmd.argv.append(word)
            if len(cmd.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            ret = self.redirs(ret)
        return ret


def parse_command(line):
    """Parse a whole command line into a command tree."""
    parser = _Parser(line)
    cmd = parser.line()
    parser.peek("")
    if parser.pos != len(line):
        raise ShellSyntaxError(f"leftovers: {line[parser.pos:]}")
    return cmd