"""Data modules - crops, expenses, farms and tasks."""

from farmhand.data.crops import Crop, CropService
from farmhand.data.expenses import Expense, ExpenseService
from farmhand.data.farms import Farm, FarmService
from farmhand.data.tasks import Task, TaskService

__all__ = [
    "Crop",
    "CropService",
    "Expense",
    "ExpenseService",
    "Farm",
    "FarmService",
    "Task",
    "TaskService",
]
