# todo_app/services/repository.py

import threading
from typing import List

from ..models.task import Task


class TaskRepository:
    """In-memory task store. Ids behave like a database serial column."""

    def __init__(self):
        self._tasks: List[Task] = []
        self._next_id = 1
        # The dev server handles requests on several threads
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._tasks)

    def get_all(self) -> List[Task]:
        # Copy so callers can't mutate the store
        with self._lock:
            return list(self._tasks)

    def create(self, description: str) -> Task:
        with self._lock:
            task = Task(id=self._next_id, description=description)
            self._next_id += 1
            self._tasks.append(task)
        return task

    def remove(self, task_id: int) -> bool:
        with self._lock:
            for index, task in enumerate(self._tasks):
                if task.id == task_id:
                    del self._tasks[index]
                    return True
        return False

    def reset(self):
        """Drop every task and restart ids at 1. Only meant for test isolation."""
        with self._lock:
            self._tasks = []
            self._next_id = 1
