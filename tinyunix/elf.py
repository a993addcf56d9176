"""ELF64 file and program header structures."""

import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELF_HEADER = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROGRAM_HEADER = struct.Struct("<IIQQQQQQ")

ELF_HEADER_SIZE = _ELF_HEADER.size
PROGRAM_HEADER_SIZE = _PROGRAM_HEADER.size


class ElfError(ValueError):
    """Raised for malformed or truncated ELF data."""


@dataclass
class ElfHeader:
    """The ELF file header."""

    magic: int = ELF_MAGIC
    elf: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    def pack(self):
        """Encode the header as little-endian bytes."""
        return _ELF_HEADER.pack(
            self.magic, self.elf, self.type, self.machine, self.version,
            self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
            self.phentsize, self.phnum, self.shentsize, self.shnum, self.shstrndx,
        )


@dataclass
class ProgramHeader:
    """One program segment header."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    def pack(self):
        """Encode the program header as little-endian bytes."""
        return _PROGRAM_HEADER.pack(
            self.type, self.flags, self.off, self.vaddr,
            self.paddr, self.filesz, self.memsz, self.align,
        )


def parse_elf_header(data):
    """Decode the file header at the start of ``data``; the magic must match."""
    try:
        fields = _ELF_HEADER.unpack_from(data, 0)
    except struct.error as exc:
        raise ElfError("truncated ELF header") from exc
    header = ElfHeader(*fields)
    if header.magic != ELF_MAGIC:
        raise ElfError(f"bad ELF magic {header.magic:#x}")
    return header


def parse_program_header(data, offset):
    """Decode the program header found at ``offset`` in ``data``."""
    if offset < 0:
        raise ElfError("negative program header offset")
    try:
        fields = _PROGRAM_HEADER.unpack_from(data, offset)
    except struct.error as exc:
        raise ElfError(f"truncated program header at offset {offset}") from exc
    return ProgramHeader(*fields)


def iter_program_headers(data):
    """Yield every program header listed by the file header of ``data``."""
    header = parse_elf_header(data)
    for i in range(header.phnum):
        yield parse_program_header(data, header.phoff + i * PROGRAM_HEADER_SIZE)