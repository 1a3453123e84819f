from .dashboard import DashboardState, DashboardStatus
from .exercise import ACTIVITY_OPTIONS, ExerciseDraft, ExerciseEntry
from .meal import MEAL_TYPES, MealDraft, MealEntry, MealType
from .responses import OperationStatus
from .summary import DashboardSummary

__all__ = [
    'ACTIVITY_OPTIONS',
    'MEAL_TYPES',
    'DashboardState',
    'DashboardStatus',
    'DashboardSummary',
    'ExerciseDraft',
    'ExerciseEntry',
    'MealDraft',
    'MealEntry',
    'MealType',
    'OperationStatus',
]
