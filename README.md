# tinyunix

Pieces of a small teaching Unix, written in plain Python with no dependencies
outside the standard library. Nothing touches real hardware and nothing starts
other programs.

## Modules

- `tinyunix.riscv`: constants and helpers for the RISC-V machine.
  - Status and interrupt register bits (`SSTATUS_SIE`, `MIE_MTIE`, ...).
  - Page-table-entry bits `PTE_V`, `PTE_R`, `PTE_W`, `PTE_X`, `PTE_U`, plus `PGSIZE` and `MAXVA`.
  - The physical memory layout: `UART0`, `VIRTIO0`, `CLINT`, `PLIC`, `KERNBASE`, `PHYSTOP`, `TRAMPOLINE`, `TRAPFRAME`.
  - Kernel parameters (`NPROC`, `MAXPATH`, `FSSIZE`, ...) and the open flags `O_RDONLY`, `O_WRONLY`, `O_RDWR`, `O_CREATE`, `O_TRUNC`.
  - Page rounding: `pg_round_up`, `pg_round_down`.
  - Entry encoding: `pa2pte`, `pte2pa`, `pte_flags`.
  - Sv39 indexing and registers: `px`, `make_satp`, `kstack`.
  - Register addresses: `clint_mtimecmp` and `plic_menable`, `plic_senable`, `plic_mpriority`, `plic_spriority`, `plic_mclaim`, `plic_sclaim`.
- `tinyunix.elf`: ELF64 file and program headers.
  - The dataclasses `ElfHeader` and `ProgramHeader`, each with `pack()` that gives little-endian bytes.
  - `parse_elf_header(data)` checks the magic.
  - `parse_program_header(data, offset)` reads one program header.
  - `iter_program_headers(data)` yields every program header the file header lists.
  - Truncated or malformed data raises `ElfError`, a `ValueError`.
- `tinyunix.printf`: a minimal formatter.
  - It understands `%d`, `%l`, `%x` (upper-case hex), `%p` (`0x` and 16 hex digits), `%s`, `%c` and `%%`.
  - Unknown conversions are copied through with their percent sign.
  - `format_message(fmt, *args)` returns the text.
  - `fprintf(stream, fmt, *args)` writes the text to a stream; `printf(fmt, *args)` writes it to standard output.
- `tinyunix.umalloc`: `Allocator`, a first-fit, address-ordered circular free list that coalesces on free.
  - Allocation is in 16-byte units, and the heap grows by at least 4096 units at a time.
  - `malloc(nbytes)` returns an address, or raises `MemoryError` when the optional `heap_size` is exhausted.
  - `free(ptr)` raises `ValueError` for an address that is not a live allocation.
  - `brk`, `allocated_bytes`, `free_bytes` and `free_blocks()` let you inspect the heap.
- `tinyunix.grep`: a matcher for `^ . * $`.
  - `match`, `match_here`, `match_star`.
  - `grep(pattern, stream)` yields the matching newline-terminated lines. A final line without a newline is not examined.
- `tinyunix.coreutils`: `cat`, `echo`, `wc`, `fmtname` and `ls`, with command entry points `cat_main`, `echo_main`, `wc_main`, `ls_main`.
  - `wc` counts lines, words and bytes of a binary stream.
  - `ls` prints the name (padded to 14 characters), type (1 directory, 2 file, 3 other), inode number and size. A directory listing includes `.` and `..`, followed by the entries in sorted order.
- `tinyunix.sh`: the shell's command-line parser.
  - `parse_command(line)` builds a tree of `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and `BackCmd`.
  - It handles `|`, `;`, `&`, `<`, `>`, `>>` and parentheses.
  - Bad input raises `ShellSyntaxError`, and so does a command with ten or more words.
- `tinyunix.rand`: the Park–Miller "minimal standard" generator.
  - `do_rand(ctx)` returns the next value from a state.
  - `ParkMiller(seed=1)` keeps its own state. Call `next()` or iterate over it.

## What it does not do

This package gives you the building blocks, but there is no kernel.

- It does not simulate page tables or physical memory; `tinyunix.riscv` only computes addresses and entry values.
- It does not load or run ELF programs.
- It has no processes and no file system of its own. The tools work on the host's files.
- The shell parses command lines into trees but does not execute them.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

```
tinyunix-grep PATTERN [FILE ...]   # print matching lines
tinyunix-cat [FILE ...]            # copy files to standard output
tinyunix-echo [ARG ...]            # print the arguments
tinyunix-wc [FILE ...]             # lines, words, bytes and name
tinyunix-ls [PATH ...]             # list files and directories
```

`grep`, `cat` and `wc` read standard input when they are given no file. `ls`
lists the current directory when it is given no path.

## Examples

```python
from tinyunix.grep import match

match("^ab*c$", "abbbc")   # True
match("x.z", "wxyz")       # True
match("^q", "aq")          # False
```

```python
from tinyunix.sh import parse_command, PipeCmd

cmd = parse_command("cat README | grep the > out")
isinstance(cmd, PipeCmd)   # True
```

```python
from tinyunix.riscv import pg_round_up, pg_round_down

pg_round_up(1)       # 4096
pg_round_down(8191)  # 4096
```

```python
from tinyunix.umalloc import Allocator

heap = Allocator()
p = heap.malloc(100)
heap.free(p)
```