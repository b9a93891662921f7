from .engine import ReviewEngine, RunResult
from .reconciler import Action, ActionOutcome, PlannedAction, ReconcileResult, Reconciler, plan_actions

__all__ = [
    "ReviewEngine",
    "RunResult",
    "Action",
    "ActionOutcome",
    "PlannedAction",
    "ReconcileResult",
    "Reconciler",
    "plan_actions",
]
