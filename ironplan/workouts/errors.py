"""Workout lifecycle error types."""


class WorkoutError(Exception):
    """Base class for workout lifecycle errors."""


class WorkoutNotFoundError(WorkoutError):
    """Raised when a workout does not exist."""

    def __init__(self, workout_id: str):
        self.workout_id = workout_id
        super().__init__(f"Workout {workout_id} not found")


class WorkoutForbiddenError(WorkoutError):
    """Raised when a user acts on a workout they do not own."""

    def __init__(self, workout_id: str, user_id: str):
        self.workout_id = workout_id
        self.user_id = user_id
        super().__init__(f"Workout {workout_id} does not belong to user {user_id}")


class InvalidWorkoutTransitionError(WorkoutError):
    """Raised when a status change is not allowed from the current status.

    Attributes:
        current: Current workout status
        action: Attempted action (complete, skip, reschedule)
    """

    def __init__(self, workout_id: str, current: str, action: str):
        self.workout_id = workout_id
        self.current = current
        self.action = action
        super().__init__(f"Cannot {action} workout {workout_id} with status '{current}'")
