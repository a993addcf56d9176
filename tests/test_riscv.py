import pytest

from tinyunix import riscv
from tinyunix.riscv import (
    KERNBASE,
    MAXVA,
    PGSIZE,
    PTE_R,
    PTE_V,
    PTE_W,
    TRAMPOLINE,
    clint_mtimecmp,
    kstack,
    make_satp,
    pa2pte,
    pg_round_down,
    pg_round_up,
    plic_mclaim,
    plic_mpriority,
    plic_sclaim,
    plic_spriority,
    plic_menable,
    plic_senable,
    pte2pa,
    pte_flags,
    px,
)


@pytest.mark.parametrize("sz", [0, 1, PGSIZE - 1, PGSIZE, PGSIZE + 1, 10 * PGSIZE + 7])
def test_round_up_is_aligned_and_minimal(sz):
    up = pg_round_up(sz)
    assert up % PGSIZE == 0
    assert sz <= up < sz + PGSIZE


@pytest.mark.parametrize("a", [0, 1, PGSIZE - 1, PGSIZE, KERNBASE + 123])
def test_round_down_is_aligned_and_maximal(a):
    down = pg_round_down(a)
    assert down % PGSIZE == 0
    assert a - PGSIZE < down <= a


def test_round_edges():
    assert pg_round_up(1) == PGSIZE
    assert pg_round_up(PGSIZE) == PGSIZE
    assert pg_round_down(PGSIZE + 1) == PGSIZE


@pytest.mark.parametrize("pa", [0, PGSIZE, KERNBASE, riscv.PHYSTOP - PGSIZE])
def test_pte_round_trip(pa):
    pte = pa2pte(pa) | PTE_R | PTE_W | PTE_V
    assert pte2pa(pte) == pa
    assert pte_flags(pte) == PTE_R | PTE_W | PTE_V


@pytest.mark.parametrize("va", [0, PGSIZE + 5, KERNBASE + 0x12345, TRAMPOLINE, MAXVA - 1])
def test_px_decomposes_address(va):
    rebuilt = va % PGSIZE
    for level in range(3):
        index = px(level, va)
        assert 0 <= index <= riscv.PXMASK
        rebuilt |= index << (riscv.PGSHIFT + 9 * level)
    assert rebuilt == va


def test_make_satp_mode_and_ppn():
    satp = make_satp(KERNBASE)
    assert satp >> 60 == 8
    assert (satp & ((1 << 44) - 1)) << 12 == KERNBASE


def test_layout_relations():
    assert MAXVA == 1 << 38
    assert pg_round_down(MAXVA - 1) == TRAMPOLINE
    assert pg_round_down(TRAMPOLINE - 1) == riscv.TRAPFRAME
    assert px(2, TRAMPOLINE) == 255
    assert px(0, TRAMPOLINE) == riscv.PXMASK
    assert pg_round_up(riscv.PHYSTOP - 1) - KERNBASE == 128 * 1024 * 1024


def test_kernel_stacks_have_guard_pages():
    assert kstack(0) == TRAMPOLINE - 2 * PGSIZE
    assert kstack(0) - kstack(1) == 2 * PGSIZE


def test_clint_and_plic_offsets():
    assert clint_mtimecmp(1) - clint_mtimecmp(0) == 8
    assert plic_sclaim(2) - plic_spriority(2) == plic_mclaim(2) - plic_mpriority(2)
    assert plic_senable(3) - plic_menable(3) == 0x80
    assert plic_mpriority(1) - plic_mpriority(0) == 0x2000


def test_parameters():
    assert riscv.LOGSIZE == 3 * riscv.MAXOPBLOCKS
    assert riscv.NBUF == riscv.LOGSIZE
    last_stack = kstack(riscv.NPROC - 1)
    assert last_stack == TRAMPOLINE - 2 * riscv.NPROC * PGSIZE
    assert last_stack > riscv.PHYSTOP
    assert pte_flags(riscv.O_RDWR | riscv.O_CREATE | riscv.O_TRUNC) == 0x202