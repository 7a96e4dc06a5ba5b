"""Goal calculator orchestrators."""

from .targets_orchestrator import NutritionTargets, NutritionTargetsOrchestrator

__all__ = ["NutritionTargets", "NutritionTargetsOrchestrator"]
