"""Task records (``task_c`` table).

Task updates are partial for the completion fields only: ``completed_c`` is
written when ``completed`` is present in the input, ``completed_at_c`` when
``completed_at`` is set. Title, description, due date, priority and farm id
are always written, so callers must supply them on every update.
"""

from dataclasses import dataclass

from farmhand.core.fields import DomainRecord, coerce_int, foreign_key_id
from farmhand.core.service import FarmScopedService


@dataclass(frozen=True)
class Task(DomainRecord):
    id: int
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    priority: str | None = None
    completed: bool = False
    completed_at: str | None = None
    farm_id: int | None = None


def task_from_record(item: dict) -> Task:
    return Task(
        id=item.get("Id"),
        title=item.get("title_c"),
        description=item.get("description_c"),
        due_date=item.get("due_date_c"),
        priority=item.get("priority_c"),
        completed=item.get("completed_c") or False,
        completed_at=item.get("completed_at_c"),
        farm_id=foreign_key_id(item.get("farm_id_c")),
    )


def task_to_record(data: dict, default_name: str = "New Task") -> dict:
    return {
        "Name": data.get("title") or default_name,
        "title_c": data.get("title"),
        "description_c": data.get("description"),
        "due_date_c": data.get("due_date"),
        "priority_c": data.get("priority"),
        "farm_id_c": coerce_int(data.get("farm_id")),
    }


class TaskService(FarmScopedService):
    table = "task_c"
    fields = (
        "title_c",
        "description_c",
        "due_date_c",
        "priority_c",
        "completed_c",
        "completed_at_c",
        "farm_id_c",
    )
    label = "tasks"

    def from_record(self, record: dict) -> Task:
        return task_from_record(record)

    def to_create_record(self, data: dict) -> dict:
        # New tasks always start open
        return {**task_to_record(data), "completed_c": False}

    def to_update_record(self, record_id: int, data: dict) -> dict:
        record = {"Id": record_id, **task_to_record(data, default_name="Updated Task")}
        if "completed" in data:
            record["completed_c"] = data["completed"]
        if data.get("completed_at"):
            record["completed_at_c"] = data["completed_at"]
        return record

    async def set_completed(self, task: Task, completed: bool, completed_at: str | None = None) -> Task:
        """Toggle completion on a task, resending its always-written fields."""
        data = {
            "title": task.title,
            "description": task.description,
            "due_date": task.due_date,
            "priority": task.priority,
            "farm_id": task.farm_id,
            "completed": completed,
        }
        if completed_at:
            data["completed_at"] = completed_at
        return await self.update(task.id, data)
