"""First-fit free-list allocator over a heap grown by moving a break."""

HEADER_SIZE = 16  # bytes per header, the allocation unit
MIN_UNITS = 4096  # the heap grows by at least this many units

_BASE = -1  # the empty sentinel block, below the heap


class Allocator:
    """A circular, address-ordered free list with coalescing on free.

    The heap starts at ``heap_base`` and may grow to ``heap_size`` bytes
    (without limit if None). Addresses handed out are byte addresses.
    """

    def __init__(self, heap_size=None, heap_base=0):
        if heap_base % HEADER_SIZE:
            raise ValueError("heap base must be aligned to the header size")
        self.heap_size = heap_size
        self.heap_base = heap_base
        self._brk_units = 0
        self._size = {}
        self._next = {}
        self._live = set()
        self._freep = None

    @property
    def brk(self):
        """Bytes obtained from the heap so far."""
        return self._brk_units * HEADER_SIZE

    @property
    def allocated_bytes(self):
        """Bytes held by live allocations, headers included."""
        return sum(self._size[u] for u in self._live) * HEADER_SIZE

    @property
    def free_bytes(self):
        """Bytes on the free list, headers included."""
        return sum(size for _, size in self.free_blocks())

    def free_blocks(self):
        """Yield (header address, size in bytes) of each free block in address order."""
        if self._freep is None:
            return
        p = self._next[_BASE]
        while p != _BASE:
            yield self._address(p), self._size[p] * HEADER_SIZE
            p = self._next[p]

    def _address(self, unit):
        return self.heap_base + unit * HEADER_SIZE

    def _sbrk(self, nunits):
        if self.heap_size is not None and (self._brk_units + nunits) * HEADER_SIZE > self.heap_size:
            return None
        start = self._brk_units
        self._brk_units += nunits
        return start

    def _morecore(self, nunits):
        nu = max(nunits, MIN_UNITS)
        unit = self._sbrk(nu)
        if unit is None:
            raise MemoryError(f"malloc: heap exhausted at {self.brk} bytes")
        self._size[unit] = nu
        self._release(unit)
        return self._freep

    def malloc(self, nbytes):
        """Allocate ``nbytes`` and return the address of the usable memory."""
        if nbytes < 0:
            raise ValueError("malloc: negative size")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._live.add(p)
                return self._address(p + 1)
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, self._next[p]

    def free(self, ptr):
        """Return memory obtained from :meth:`malloc` to the free list."""
        offset = ptr - self.heap_base
        unit = offset // HEADER_SIZE - 1
        if offset % HEADER_SIZE or unit not in self._live:
            raise ValueError(f"free: {ptr:#x} is not an allocated block")
        self._live.remove(unit)
        self._release(unit)

    def _release(self, bp):
        size, nxt = self._size, self._next
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        after = nxt[p]
        if bp + size[bp] == after:
            size[bp] += size.pop(after)
            nxt[bp] = nxt.pop(after)
        else:
            nxt[bp] = after
        if p + size[p] == bp:
            size[p] += size.pop(bp)
            nxt[p] = nxt.pop(bp)
        else:
            nxt[p] = bp
        self._freep = p