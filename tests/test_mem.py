import pytest

from ecusim.mem import AllocationError, MemoryManager


@pytest.fixture
def mem():
    return MemoryManager()


def test_allocate_returns_zeroed_buffer(mem):
    block = mem.allocate(16)
    assert block == bytearray(16)
    assert mem.check(block) is True
    assert mem.allocation_count == 1


def test_free_then_check_fails(mem):
    block = mem.allocate(4)
    mem.free(block)
    assert mem.check(block) is False


def test_double_free_raises(mem):
    block = mem.allocate(4)
    mem.free(block)
    with pytest.raises(AllocationError):
        mem.free(block)


def test_free_none_raises(mem):
    with pytest.raises(AllocationError):
        mem.free(None)


def test_foreign_block_rejected(mem):
    foreign = bytearray(4)
    assert mem.check(foreign) is False
    with pytest.raises(AllocationError):
        mem.free(foreign)


def test_equal_but_distinct_blocks_tracked_by_identity(mem):
    a = mem.allocate(2)
    b = mem.allocate(2)
    mem.free(a)
    assert mem.check(b) is True
    assert mem.check(a) is False


def test_limit_counts_freed_slots():
    mem = MemoryManager(2)
    first = mem.allocate(1)
    mem.allocate(1)
    mem.free(first)
    with pytest.raises(AllocationError):
        mem.allocate(1)


def test_reset_restores_capacity():
    mem = MemoryManager(1)
    mem.allocate(1)
    mem.reset()
    assert mem.allocation_count == 0
    assert len(mem.allocate(3)) == 3


def test_negative_size_rejected(mem):
    with pytest.raises(AllocationError):
        mem.allocate(-1)
    assert mem.allocation_count == 0