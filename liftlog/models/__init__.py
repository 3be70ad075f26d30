from liftlog.models.exercise import Exercise
from liftlog.models.workout_plan import WorkoutPlan, PlanExercise
from liftlog.models.workout_log import WorkoutLog, WorkoutSet

__all__ = ["Exercise", "WorkoutPlan", "PlanExercise", "WorkoutLog", "WorkoutSet"]
