from nexaboard.domain.task.aggregates.task import UNASSIGNED, Task

__all__ = ["UNASSIGNED", "Task"]
