from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional, Union
from urllib.parse import quote
import asyncio
import logging

from ramplo.client.api_client import ApiClient, ApiError
from ramplo.client.query_cache import QueryCache
from ramplo.config import TASK_COMPLETION_DELAY_SECONDS

logger = logging.getLogger(__name__)

TASKS_QUERY_KEY = "/api/tasks"


@dataclass(frozen=True)
class Toast:
    title: str
    description: str = ""
    variant: str = "default"


COMPLETED_TOAST = Toast(title="Task completed!", description="Great job staying on track!")


class CompletionState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class TaskCompletionError(Exception):
    def __init__(self, task_id: str, message: str, retryable: bool):
        super().__init__(message)
        self.task_id = task_id
        self.retryable = retryable


def _log_toast(toast: Toast):
    logger.info(f"[Toast] {toast.title} {toast.description}".rstrip())


class TaskCompletionController:
    """Completes tasks against the API and keeps the cached task list in sync.

    Each task moves through IDLE -> PENDING -> SUCCESS | FAILED -> IDLE.
    A successful completion stays in SUCCESS for ``settle_delay`` seconds so the
    completion animation can play; the settle step then clears the marker,
    invalidates the task list and shows the toast. Pending settle steps are
    cancelled by :meth:`close`.
    """

    def __init__(
        self,
        api: ApiClient,
        cache: QueryCache,
        notify: Optional[Callable[[Toast], None]] = None,
        settle_delay: float = TASK_COMPLETION_DELAY_SECONDS,
    ):
        self.api = api
        self.cache = cache
        self.notify = notify or _log_toast
        self.settle_delay = settle_delay
        self._expanded_task_id: Optional[str] = None
        self._states: Dict[str, CompletionState] = {}
        self._errors: Dict[str, TaskCompletionError] = {}
        self._settles: Dict[str, asyncio.TimerHandle] = {}
        self._closed = False

    @property
    def expanded_task_id(self) -> Optional[str]:
        return self._expanded_task_id

    @property
    def completing_task_ids(self) -> FrozenSet[str]:
        return frozenset(
            task_id
            for task_id, state in self._states.items()
            if state in (CompletionState.PENDING, CompletionState.SUCCESS)
        )

    @property
    def is_pending(self) -> bool:
        return CompletionState.PENDING in self._states.values()

    def is_completing(self, task_id: str) -> bool:
        return task_id in self.completing_task_ids

    def state_of(self, task_id: str) -> CompletionState:
        return self._states.get(task_id, CompletionState.IDLE)

    def error_for(self, task_id: str) -> Optional[TaskCompletionError]:
        return self._errors.get(task_id)

    def toggle_expand(self, task) -> Optional[str]:
        task_id = task if isinstance(task, str) else task.id
        if self._expanded_task_id == task_id:
            self._expanded_task_id = None
        else:
            self._expanded_task_id = task_id
        return self._expanded_task_id

    async def complete_task(self, task_id: str) -> bool:
        """Send the completion request for ``task_id``.

        Returns False when the task is already being completed. Raises
        TaskCompletionError when the request fails.
        """
        if not task_id:
            raise ValueError("task_id must be a non-empty identifier")
        if self._closed:
            raise RuntimeError("Controller is closed")
        if self.is_completing(task_id):
            logger.debug(f"[Tasks] Ignoring duplicate completion for {task_id}")
            return False

        self._errors.pop(task_id, None)
        self._states[task_id] = CompletionState.PENDING
        try:
            await self.api.patch(
                f"{TASKS_QUERY_KEY}/{quote(task_id, safe='')}/complete", decode=False
            )
        except ApiError as e:
            self._fail(task_id, e)
            raise self._errors[task_id] from e
        except BaseException:
            # Cancellation or any other error must not leave the task PENDING
            self._states.pop(task_id, None)
            raise

        if self._closed:
            self._states.pop(task_id, None)
            return True

        self._states[task_id] = CompletionState.SUCCESS
        loop = asyncio.get_running_loop()
        self._settles[task_id] = loop.call_later(
            self.settle_delay, self._settle, task_id
        )
        return True

    def _settle(self, task_id: str):
        self._settles.pop(task_id, None)
        self._states.pop(task_id, None)
        self.cache.invalidate(TASKS_QUERY_KEY)
        self.notify(COMPLETED_TOAST)

    def _fail(self, task_id: str, error: ApiError):
        self._states[task_id] = CompletionState.FAILED
        logger.warning(f"[Tasks] Completing task {task_id} failed: {error}")
        self._errors[task_id] = TaskCompletionError(
            task_id, str(error), retryable=error.retryable
        )
        self.notify(
            Toast(
                title="Could not complete task",
                description="Please try again." if error.retryable else str(error),
                variant="destructive",
            )
        )
        self._states.pop(task_id, None)

    def close(self):
        """Cancel pending settle steps; the controller cannot be used afterwards."""
        self._closed = True
        for handle in self._settles.values():
            handle.cancel()
        self._settles.clear()
        self._states.clear()
