"""Plan generation error types.

Generation either fully succeeds or raises one of these before returning
any workout.
"""


class PlanGenerationError(ValueError):
    """Base class for plan generation failures."""


class InsufficientLeadTimeError(PlanGenerationError):
    """Raised when the race is too close to build an Ironman plan.

    Attributes:
        total_weeks: Whole weeks between the as-of date and the race
        minimum_weeks: Minimum number of weeks required
    """

    def __init__(self, total_weeks: int, minimum_weeks: int):
        self.total_weeks = total_weeks
        self.minimum_weeks = minimum_weeks
        super().__init__(
            f"Need at least {minimum_weeks} weeks to train for an Ironman. You have {total_weeks} weeks."
        )


class InvalidInputError(PlanGenerationError):
    """Raised when a training profile field is malformed or out of range.

    Attributes:
        field: Name of the offending field
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
