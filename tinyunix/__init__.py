"""Pieces of a small teaching Unix: RISC-V helpers, ELF headers, printf, an allocator, grep, core tools, a shell parser and a PRNG."""

__version__ = "0.1.0"