import random

import pytest

from tinyunix.umalloc import HEADER_SIZE, MIN_UNITS, Allocator


def _check_accounting(heap):
    assert heap.free_bytes + heap.allocated_bytes == heap.brk


def test_addresses_are_aligned():
    heap = Allocator()
    for n in (1, 15, 16, 17, 100):
        addr = heap.malloc(n)
        assert (addr - heap.heap_base) % HEADER_SIZE == 0


def test_allocations_do_not_overlap():
    heap = Allocator()
    sizes = [10, 200, 33, 4000, 1]
    blocks = sorted((heap.malloc(n), n) for n in sizes)
    for (a, n), (b, _) in zip(blocks, blocks[1:]):
        assert a + n <= b - HEADER_SIZE


def test_allocations_lie_within_heap():
    heap = Allocator(heap_base=0x1000)
    addr = heap.malloc(50)
    assert heap.heap_base < addr
    assert addr + 50 <= heap.heap_base + heap.brk


def test_freed_block_is_reused():
    heap = Allocator()
    first = heap.malloc(10)
    heap.free(first)
    assert heap.malloc(10) == first


def test_first_growth_is_minimum_chunk():
    heap = Allocator()
    heap.malloc(1)
    assert heap.brk == MIN_UNITS * HEADER_SIZE


def test_large_request_grows_heap_enough():
    heap = Allocator()
    request = MIN_UNITS * HEADER_SIZE * 2
    heap.malloc(request)
    assert heap.brk >= request + HEADER_SIZE
    _check_accounting(heap)


def test_everything_freed_coalesces_into_one_block():
    heap = Allocator()
    addrs = [heap.malloc(n) for n in (10, 20, 30, 40, 50)]
    for addr in addrs[::2] + addrs[1::2]:
        heap.free(addr)
    assert heap.allocated_bytes == 0
    assert heap.free_bytes == heap.brk
    assert len(list(heap.free_blocks())) == 1


def test_accounting_invariant_over_random_operations():
    rng = random.Random(7)
    heap = Allocator()
    live = []
    for _ in range(500):
        if live and rng.random() < 0.45:
            heap.free(live.pop(rng.randrange(len(live))))
        else:
            live.append(heap.malloc(rng.randrange(0, 3000)))
        _check_accounting(heap)
    blocks = list(heap.free_blocks())
    assert blocks == sorted(blocks)


def test_heap_limit_raises_memory_error():
    heap = Allocator(heap_size=1000)
    with pytest.raises(MemoryError):
        heap.malloc(10)


def test_exhausting_a_limited_heap():
    heap = Allocator(heap_size=MIN_UNITS * HEADER_SIZE)
    heap.malloc(100)
    with pytest.raises(MemoryError):
        heap.malloc(MIN_UNITS * HEADER_SIZE)
    _check_accounting(heap)


def test_free_of_unknown_pointer_raises():
    heap = Allocator()
    addr = heap.malloc(10)
    with pytest.raises(ValueError):
        heap.free(addr + 1)
    with pytest.raises(ValueError):
        heap.free(addr + HEADER_SIZE)


def test_double_free_raises():
    heap = Allocator()
    addr = heap.malloc(10)
    heap.free(addr)
    with pytest.raises(ValueError):
        heap.free(addr)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Allocator().malloc(-1)