"""동시 출력 데모 — 병렬/동기화 출력.

Concurrent printing demonstration.

The calling thread prints the first ``head_count`` items, then
``worker_count`` fresh threads print ``batch_size`` items each. Workers are
started and joined inside the same call; there is no pool.

- ``print_parallel``: workers print freely, so lines from different
  workers may interleave (and ``print`` may even tear a line from its
  newline).
- ``print_synchronized``: every single print goes through one lock that is
  owned by the call, so each line is written atomically.

Defaults (2 head + 2 workers x 2 items) need exactly six items.
"""

import threading
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from enum import Enum

from app.utils.logging import get_logger

log = get_logger(__name__)

MAIN_THREAD_LABEL: str = "Main thread"


class PrintStatus(str, Enum):
    """출력 호출 결과 상태 (Outcome of a print call)."""

    COMPLETED = "completed"
    SKIPPED = "skipped"  # 항목 부족 — not enough items, nothing printed
    INTERRUPTED = "interrupted"  # join 취소됨 — join was cancelled, output may be incomplete


@dataclass(frozen=True)
class NamedItem:
    """출력 대상 항목 — 생성 후 변경 불가 (Immutable item to print)."""

    id: int
    name: str


@dataclass(frozen=True)
class PrintReport:
    status: PrintStatus
    printed: int
    required: int


class ConcurrentPrinter:
    """호출 스레드 + 고정 워커 스레드로 항목 이름을 출력합니다.

    Prints item names from the calling thread and a fixed set of worker
    threads. Holds no state between calls.

    Args:
        worker_count: 워커 스레드 수 (Number of worker threads, >= 1)
        head_count: 호출 스레드가 먼저 출력할 항목 수 (Items printed before workers start, >= 0)
        batch_size: 워커당 항목 수 (Items per worker, >= 1)
        write: 한 줄을 출력하는 함수 (Line sink, defaults to print)
        poll_interval: 취소 확인 주기(초) (Seconds between cancel checks while joining)
    """

    def __init__(
        self,
        worker_count: int = 2,
        head_count: int = 2,
        batch_size: int = 2,
        write: Callable[[str], object] = print,
        poll_interval: float = 0.05,
    ) -> None:
        if worker_count < 1:
            raise ValueError("worker_count must be at least 1")
        if head_count < 0:
            raise ValueError("head_count must not be negative")
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.worker_count: int = worker_count
        self.head_count: int = head_count
        self.batch_size: int = batch_size
        self._write: Callable[[str], object] = write
        self._poll_interval: float = poll_interval

    @property
    def required(self) -> int:
        """출력에 필요한 최소 항목 수 (Minimum number of items a call needs)."""
        return self.head_count + self.worker_count * self.batch_size

    @staticmethod
    def format_line(label: str, position: int, item: NamedItem) -> str:
        return f"{label} - Student {position + 1}: {item.name}"

    def print_parallel(
        self,
        items: Sequence[NamedItem],
        cancel: threading.Event | None = None,
    ) -> PrintReport:
        """잠금 없이 출력합니다. 워커 간 순서는 보장되지 않습니다.

        Print without locking; ordering between workers is unspecified.
        """
        return self._run("parallel", items, nullcontext(), cancel)

    def print_synchronized(
        self,
        items: Sequence[NamedItem],
        cancel: threading.Event | None = None,
        lock: AbstractContextManager | None = None,
    ) -> PrintReport:
        """모든 출력을 하나의 잠금으로 직렬화합니다.

        Serialize every print through a single lock. A fresh lock is created
        for the call unless one is passed in.
        """
        return self._run("synchronized", items, lock if lock is not None else threading.Lock(), cancel)

    def _run(
        self,
        mode: str,
        items: Sequence[NamedItem],
        guard: AbstractContextManager,
        cancel: threading.Event | None,
    ) -> PrintReport:
        snapshot: list[NamedItem] = list(items)
        if len(snapshot) < self.required:
            log.warning(
                "print_skipped",
                mode=mode,
                reason="insufficient items",
                required=self.required,
                available=len(snapshot),
            )
            return PrintReport(PrintStatus.SKIPPED, 0, self.required)

        def emit(label: str, position: int) -> None:
            line: str = self.format_line(label, position, snapshot[position])
            with guard:
                self._write(line)

        # 호출 스레드 출력 — head items, in order, before any worker starts
        head_printed: int = 0
        try:
            for position in range(self.head_count):
                emit(MAIN_THREAD_LABEL, position)
                head_printed += 1
        except Exception:
            # 실패해도 워커는 계속 — workers still get their batches
            log.exception("print_head_failed", mode=mode, worker=MAIN_THREAD_LABEL)

        printed_by_worker: list[int] = [0] * self.worker_count
        threads: list[threading.Thread] = []
        for index in range(self.worker_count):
            start: int = self.head_count + index * self.batch_size
            thread = threading.Thread(
                target=self._work,
                args=(mode, index, range(start, start + self.batch_size), emit, printed_by_worker),
                name=f"printer-{index + 1}",
                daemon=True,
            )
            threads.append(thread)

        for thread in threads:
            thread.start()

        if not self._join(threads, cancel):
            printed: int = head_printed + sum(printed_by_worker)
            log.warning("print_interrupted", mode=mode, printed=printed, required=self.required)
            return PrintReport(PrintStatus.INTERRUPTED, printed, self.required)

        printed = head_printed + sum(printed_by_worker)
        log.info("print_completed", mode=mode, printed=printed)
        return PrintReport(PrintStatus.COMPLETED, printed, self.required)

    @staticmethod
    def _work(
        mode: str,
        index: int,
        positions: range,
        emit: Callable[[str, int], None],
        printed_by_worker: list[int],
    ) -> None:
        label: str = f"Thread {index + 1}"
        try:
            for position in positions:
                emit(label, position)
                printed_by_worker[index] += 1
        except Exception:
            # 워커 실패는 여기서 기록만 — sibling workers and the caller keep going
            log.exception("print_worker_failed", mode=mode, worker=label)

    def _join(self, threads: list[threading.Thread], cancel: threading.Event | None) -> bool:
        """모든 워커를 기다립니다. 취소되면 False.

        Wait for every worker. Returns False if ``cancel`` was set first.
        """
        for thread in threads:
            if cancel is None:
                thread.join()
                continue
            while thread.is_alive():
                if cancel.is_set():
                    return False
                thread.join(self._poll_interval)
        return True
