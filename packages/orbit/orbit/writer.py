"""Single-writer queue per parent task for read-transform-write sequences."""

import asyncio
import inspect
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Deque, Dict, List, Optional, Tuple, TypeVar

from .schemas import ParentTask

logger = logging.getLogger(__name__)

T = TypeVar("T")

Job = Tuple[Callable[[], Any], asyncio.Future]


@dataclass
class _TaskLane:
    """Pending writes for one parent task and the worker draining them."""
    pending: Deque[Job] = field(default_factory=deque)
    worker: Optional[asyncio.Task] = None


class ParentTaskWriter:
    """
    Serializes work per parent task id.

    Jobs for the same task run one at a time in submission order; jobs for
    different tasks may overlap up to ``max_concurrency``. Two rapid
    completion toggles therefore each see the other's saved result instead
    of overwriting it.

    A task's lane exists only while it has pending writes: the worker
    retires it as soon as the last job finishes.
    """

    def __init__(self, max_concurrency: int = 4) -> None:
        self._lanes: Dict[str, _TaskLane] = {}
        self._state_lock = asyncio.Lock()
        self._global_semaphore = asyncio.Semaphore(max_concurrency)

    @property
    def active_task_ids(self) -> List[str]:
        """Parent task ids with writes queued or running."""
        return list(self._lanes)

    async def submit(self, task_id: str, fn: Callable[[], Awaitable[T] | T]) -> T:
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()

        # Enqueue under the lock so a retiring worker cannot drop the job
        async with self._state_lock:
            lane = self._lanes.get(task_id)
            if lane is None:
                lane = _TaskLane()
                self._lanes[task_id] = lane
                lane.worker = asyncio.create_task(self._drain(task_id, lane))
            lane.pending.append((fn, future))

        return await future

    async def update(
        self,
        task_id: str,
        load: Callable[[str], Awaitable[ParentTask] | ParentTask],
        transform: Callable[[ParentTask], ParentTask],
        save: Callable[[ParentTask], Awaitable[None] | None],
    ) -> ParentTask:
        """
        Load, transform and save one parent task without interleaving.

        Args:
            task_id: Parent task id (lane key)
            load: Reads the stored task
            transform: Pure function producing the new task
            save: Persists the new task

        Returns:
            The saved task
        """
        async def run() -> ParentTask:
            task = load(task_id)
            if inspect.isawaitable(task):
                task = await task
            updated = transform(task)
            saved = save(updated)
            if inspect.isawaitable(saved):
                await saved
            return updated

        return await self.submit(task_id, run)

    async def close(self) -> None:
        """Cancel running workers and every write still waiting."""
        async with self._state_lock:
            lanes = list(self._lanes.values())
            self._lanes.clear()

        workers = [lane.worker for lane in lanes if lane.worker is not None]
        for lane in lanes:
            for _, future in lane.pending:
                future.cancel()
            lane.pending.clear()
        for worker in workers:
            worker.cancel()
        await asyncio.gather(*workers, return_exceptions=True)

    async def _drain(self, task_id: str, lane: _TaskLane) -> None:
        while True:
            async with self._state_lock:
                if not lane.pending:
                    if self._lanes.get(task_id) is lane:
                        del self._lanes[task_id]
                    return
                fn, future = lane.pending.popleft()

            if future.cancelled():
                continue
            try:
                async with self._global_semaphore:
                    result = fn()
                    if inspect.isawaitable(result):
                        result = await result
            except Exception as exc:
                logger.warning(f"Write for task {task_id} failed: {exc}")
                if not future.cancelled():
                    future.set_exception(exc)
            else:
                if not future.cancelled():
                    future.set_result(result)
