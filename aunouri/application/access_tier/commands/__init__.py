"""Access tier commands."""

from .record_meal_log import RecordMealLogCommand, RecordMealLogHandler

__all__ = ["RecordMealLogCommand", "RecordMealLogHandler"]
