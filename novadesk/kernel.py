"""Core kernel services: a fixed page allocator and a round-robin scheduler."""

from __future__ import annotations

PAGE_SIZE = 4096
MAX_PAGES = 1024
MAX_PROCESSES = 64


class OutOfPagesError(MemoryError):
    """Every page is in use."""


class PageAllocator:
    """Hands out fixed-size pages of a pool as byte offsets."""

    def __init__(self, page_count: int = MAX_PAGES, page_size: int = PAGE_SIZE) -> None:
        self.page_size = page_size
        self._used = [False] * page_count

    def alloc(self) -> int:
        """Reserve the lowest free page and return its offset in the pool."""
        for index, used in enumerate(self._used):
            if not used:
                self._used[index] = True
                return index * self.page_size
        raise OutOfPagesError("no free pages")

    def free(self, offset: int) -> None:
        """Release the page at ``offset``; offsets not on a page boundary are ignored."""
        if offset < 0 or offset % self.page_size:
            return
        index = offset // self.page_size
        if index < len(self._used):
            self._used[index] = False


class RoundRobinScheduler:
    """Cycles through a bounded table of process ids."""

    def __init__(self) -> None:
        self.processes: list[int] = []
        self.current = 0

    def add_process(self, pid: int) -> None:
        """Add a process to the rotation."""
        if len(self.processes) >= MAX_PROCESSES:
            raise OverflowError("process table full")
        self.processes.append(pid)

    def tick(self) -> int | None:
        """Switch to the next process and return its id; None when there is none."""
        if not self.processes:
            return None
        self.current = (self.current + 1) % len(self.processes)
        pid = self.processes[self.current]
        print(f"[Scheduler] Switched to process {pid}")
        return pid