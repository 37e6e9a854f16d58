"""Block-chained scratch memory for parser data, plus copying string helpers."""

from __future__ import annotations

from types import TracebackType

from minishparse.strings import substr

BLOCK_SIZE = 32 * 1024


class Arena:
    """A bump allocator over a chain of fixed-size byte blocks.

    Allocations are carved from the current block; when a request does not
    fit, a fresh block is opened. Everything is given back at once by
    :meth:`release`.
    """

    def __init__(self, block_size: int = BLOCK_SIZE) -> None:
        if block_size <= 0:
            raise ValueError(f"block size must be positive, got {block_size}")
        self.block_size = block_size
        self._blocks: list[bytearray] = []
        self._offset = 0
        self._used = 0

    @property
    def block_count(self) -> int:
        """Number of blocks currently held."""
        return len(self._blocks)

    @property
    def used(self) -> int:
        """Total bytes handed out since the last release."""
        return self._used

    def alloc(self, size: int) -> memoryview:
        """Reserve size bytes and return a writable view of them."""
        if size < 0:
            raise ValueError(f"allocation size must not be negative, got {size}")
        if size > self.block_size:
            raise MemoryError(
                f"cannot allocate {size} bytes from blocks of {self.block_size}"
            )
        if not self._blocks or self._offset + size > self.block_size:
            self._blocks.append(bytearray(self.block_size))
            self._offset = 0
        block = self._blocks[-1]
        view = memoryview(block)[self._offset:self._offset + size]
        self._offset += size
        self._used += size
        return view

    def store(self, text: str | None) -> str | None:
        """Copy text into the arena, NUL-terminated, and return the stored copy."""
        if text is None:
            return None
        data = text.encode("utf-8")
        view = self.alloc(len(data) + 1)
        view[: len(data)] = data
        view[len(data)] = 0
        return bytes(view[: len(data)]).decode("utf-8")

    def release(self) -> None:
        """Drop every block; the arena may be used again afterwards."""
        self._blocks.clear()
        self._offset = 0
        self._used = 0

    def __enter__(self) -> Arena:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


def arena_substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most length characters of s from start; None when s is None."""
    if s is None:
        return None
    return substr(s, start, length)


def arena_join(s1: str | None, s2: str | None) -> str | None:
    """Join two strings; a missing side yields a copy of the other, both missing None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2