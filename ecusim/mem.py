"""Bookkeeping memory manager handing out byte buffers."""

from __future__ import annotations

import logging

from ecusim.types import EcuError

logger = logging.getLogger(__name__)

MAX_ALLOCATIONS = 100


class AllocationError(EcuError):
    """Raised when a block cannot be allocated or freed."""


class MemoryManager:
    """Tracks up to ``max_allocations`` allocations.

    Slots of freed blocks are not reused: the limit counts every
    allocation made since the last reset.
    """

    def __init__(self, max_allocations: int = MAX_ALLOCATIONS) -> None:
        self.max_allocations = max_allocations
        self._slots: list[bytearray | None] = []
        self.reset()

    @property
    def allocation_count(self) -> int:
        return len(self._slots)

    def reset(self) -> None:
        """Forget every allocation."""
        self._slots.clear()
        logger.info("Memory Management System Initialized.")

    def allocate(self, size: int) -> bytearray:
        """Return a fresh zeroed buffer of ``size`` bytes."""
        if len(self._slots) >= self.max_allocations:
            raise AllocationError(
                "Memory allocation failed: Maximum allocation count reached."
            )
        if size < 0:
            raise AllocationError(f"Memory allocation failed: invalid size {size}")
        try:
            block = bytearray(size)
        except MemoryError as exc:
            raise AllocationError("Memory allocation failed: Not enough memory.") from exc
        self._slots.append(block)
        logger.info("Memory allocated: %d bytes at address %#x", size, id(block))
        return block

    def free(self, block: bytearray | None) -> None:
        """Release a block handed out by :meth:`allocate`."""
        if block is None:
            raise AllocationError("Memory free failed: Null pointer provided.")
        for index, slot in enumerate(self._slots):
            if slot is block:
                self._slots[index] = None
                logger.info("Memory freed at address %#x", id(block))
                return
        raise AllocationError(f"Memory free failed: Invalid pointer {id(block):#x}")

    def check(self, block: bytearray | None) -> bool:
        """Return whether ``block`` is tracked by this manager."""
        valid = any(slot is block for slot in self._slots)
        logger.info(
            "Memory check: %s pointer %#x", "Valid" if valid else "Invalid", id(block)
        )
        return valid