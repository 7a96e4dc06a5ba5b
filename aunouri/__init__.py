"""AuNouri nutrition and access-tier core.

Goal calculation (calorie, macro and time-to-goal targets) and tiered
feature gating (day windows and daily meal-logging quotas).
"""

__version__ = "0.1.0"
