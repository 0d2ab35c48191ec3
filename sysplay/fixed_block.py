"""A fixed-size block allocator over a single pre-allocated arena."""

from __future__ import annotations


class FixedBlockAllocator:
    """Hands out equally sized blocks from one contiguous arena.

    Blocks are identified by their byte offset into the arena. Freed blocks
    are kept on a stack, so the most recently freed block is reused first.
    """

    def __init__(self, block_size: int, num_blocks: int) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be a positive integer")
        if num_blocks < 0:
            raise ValueError("num_blocks must not be negative")
        self._block_size = block_size
        self._num_blocks = num_blocks
        self._memory = bytearray(block_size * num_blocks)
        self._free = [index * block_size for index in range(num_blocks)]
        self._free_set = set(self._free)

    @property
    def block_size(self) -> int:
        """Size of each block in bytes."""
        return self._block_size

    @property
    def num_blocks(self) -> int:
        """Total number of blocks in the arena."""
        return self._num_blocks

    @property
    def num_free_blocks(self) -> int:
        """Number of blocks currently available."""
        return len(self._free)

    @property
    def num_used_blocks(self) -> int:
        """Number of blocks currently handed out."""
        return self._num_blocks - len(self._free)

    def _is_block_address(self, address: int) -> bool:
        end = self._block_size * self._num_blocks
        return 0 <= address < end and address % self._block_size == 0

    def allocate(self) -> int | None:
        """Return the offset of a free block, or None if the arena is exhausted."""
        if not self._free:
            return None
        address = self._free.pop()
        self._free_set.discard(address)
        return address

    def deallocate(self, address: int | None) -> None:
        """Return a block to the free list.

        Offsets outside the arena, offsets not on a block boundary and blocks
        that are already free are silently ignored.
        """
        if address is None or not self._is_block_address(address):
            return
        if address in self._free_set:
            return
        self._free.append(address)
        self._free_set.add(address)

    def block(self, address: int) -> memoryview:
        """Return a writable view of the block starting at ``address``."""
        if not self._is_block_address(address):
            raise ValueError(f"{address} is not the start of a block in this allocator")
        return memoryview(self._memory)[address : address + self._block_size]