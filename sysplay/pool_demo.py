"""Demonstration of the fixed-block allocator and the memory pool."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from sysplay.fixed_block import FixedBlockAllocator
from sysplay.memory_pool import MemoryPool


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def demonstrate_fixed_block_allocator(stream: TextIO | None = None) -> None:
    """Walk through allocating, freeing and reusing fixed-size blocks."""
    out = _out(stream)
    print("=== Fixed Block Allocator Demonstration ===", file=out)
    block_size = 64
    num_blocks = 10
    try:
        allocator = FixedBlockAllocator(block_size, num_blocks)

        def report() -> None:
            print(f"Free blocks: {allocator.num_free_blocks}", file=out)
            print(f"Used blocks: {allocator.num_used_blocks}", file=out)

        print(
            f"Allocator created with block size {allocator.block_size} "
            f"and {allocator.num_blocks} blocks.",
            file=out,
        )
        report()

        blocks = []
        for index in range(num_blocks):
            address = allocator.allocate()
            if address is None:
                print(f"Failed to allocate block {index}", file=out)
                break
            blocks.append(address)
            print(f"Allocated block {index} at offset {address}", file=out)
        report()

        if allocator.allocate() is None:
            print("As expected, failed to allocate an extra block.", file=out)

        for address in blocks[::2]:
            allocator.deallocate(address)
            print(f"Deallocated block at offset {address}", file=out)
        report()

        for index in range(len(blocks) // 2):
            address = allocator.allocate()
            if address is None:
                print(f"Failed to re-allocate block {index}", file=out)
            else:
                print(f"Re-allocated block at offset {address}", file=out)
        report()
    except (ValueError, MemoryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    print(file=out)


def demonstrate_memory_pool(stream: TextIO | None = None) -> None:
    """Walk through allocating and freeing variable-size regions."""
    out = _out(stream)
    print("=== General Memory Pool Demonstration ===", file=out)
    try:
        pool = MemoryPool(1024)

        def report() -> None:
            print(f"Used size: {pool.used_size} bytes.", file=out)
            print(f"Free size: {pool.free_size} bytes.", file=out)

        print(f"Pool created with size {pool.total_size} bytes.", file=out)
        report()

        blocks = []
        for size in (100, 200, 50, 300):
            address = pool.allocate(size)
            if address is None:
                print(f"Failed to allocate block of size {size}", file=out)
            else:
                blocks.append((address, size))
                print(f"Allocated block of size {size} at offset {address}", file=out)
        report()

        for address, size in blocks[::2]:
            pool.deallocate(address, size)
            print(f"Deallocated block of size {size} at offset {address}", file=out)
        report()

        address = pool.allocate(150)
        if address is None:
            print("Failed to allocate new block of size 150.", file=out)
        else:
            print(f"Allocated new block of size 150 at offset {address}", file=out)
        report()
    except (ValueError, MemoryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    print(file=out)


def performance_comparison(stream: TextIO | None = None) -> None:
    """Time plain buffer creation against the fixed-block allocator."""
    out = _out(stream)
    print("=== Performance Comparison (bytearray vs FixedBlockAllocator) ===", file=out)
    num_allocations = 10000
    block_size = 64

    start = time.perf_counter()
    buffers = [bytearray(block_size) for _ in range(num_allocations)]
    buffers.clear()
    plain_us = int((time.perf_counter() - start) * 1_000_000)

    start = time.perf_counter()
    allocator = FixedBlockAllocator(block_size, num_allocations)
    taken = [address for address in iter(allocator.allocate, None)]
    for address in taken:
        allocator.deallocate(address)
    pool_us = int((time.perf_counter() - start) * 1_000_000)

    print(
        f"bytearray time for {num_allocations} allocations/deallocations: "
        f"{plain_us} microseconds",
        file=out,
    )
    print(
        f"FixedBlockAllocator time for {num_allocations} allocations/deallocations: "
        f"{pool_us} microseconds",
        file=out,
    )
    print(file=out)


def main(argv: list[str] | None = None) -> int:
    """Run all demonstrations; return the exit status."""
    try:
        demonstrate_fixed_block_allocator()
        demonstrate_memory_pool()
        performance_comparison()
    except Exception as exc:  # noqa: BLE001 - top-level report
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())