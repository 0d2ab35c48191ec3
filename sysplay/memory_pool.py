"""A variable-size memory pool keeping free regions indexed by size."""

from __future__ import annotations

from bisect import bisect_left


class MemoryPool:
    """Allocates byte ranges of arbitrary size from one arena.

    Free regions are indexed by their size and the smallest region that fits
    a request is split. Regions of equal size share one slot in the index,
    so a newer region of the same size replaces an older one.
    """

    def __init__(self, initial_pool_size: int) -> None:
        if initial_pool_size < 0:
            raise ValueError("initial_pool_size must not be negative")
        self._total = initial_pool_size
        self._used = 0
        self._free: dict[int, int] = {initial_pool_size: 0}

    @property
    def total_size(self) -> int:
        """Total size of the pool in bytes."""
        return self._total

    @property
    def used_size(self) -> int:
        """Bytes currently handed out."""
        return self._used

    @property
    def free_size(self) -> int:
        """Bytes not handed out."""
        return self._total - self._used

    def allocate(self, size: int) -> int | None:
        """Return the offset of a region of ``size`` bytes, or None if none fits."""
        if size <= 0:
            return None
        sizes = sorted(self._free)
        index = bisect_left(sizes, size)
        if index == len(sizes):
            return None
        block_size = sizes[index]
        address = self._free.pop(block_size)
        remaining = block_size - size
        if remaining > 0:
            self._free[remaining] = address + size
        self._used += size
        return address

    def deallocate(self, address: int | None, size: int) -> None:
        """Return a region to the pool and merge it with adjacent free regions.

        A missing address, a non-positive size or a range outside the pool is
        ignored.
        """
        if address is None or size <= 0:
            return
        if address < 0 or address + size > self._total:
            return
        self._free[size] = address
        self._used -= size
        self._coalesce()

    def _coalesce(self) -> None:
        merged: dict[int, int] = {}
        current: tuple[int, int] | None = None
        for address, size in sorted((addr, sz) for sz, addr in self._free.items()):
            if current is not None and current[0] + current[1] == address:
                current = (current[0], current[1] + size)
                continue
            if current is not None:
                merged[current[1]] = current[0]
            current = (address, size)
        if current is not None:
            merged[current[1]] = current[0]
        self._free = merged