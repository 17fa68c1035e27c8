"""Exception types raised by sleeptrack."""


class SleeptrackError(Exception):
    """Base exception for sleeptrack errors."""

    def __init__(self, component: str, message: str) -> None:
        self.component = component
        self.message = message
        super().__init__(f"[{component}] {message}")


class DataImportError(SleeptrackError):
    """Raised when an export bundle cannot be parsed or validated."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        super().__init__("dataio", message)


class InvalidGoalTransition(SleeptrackError):
    """Raised when a goal is moved to a status its lifecycle does not allow."""

    def __init__(self, goal_id: str, current: str, requested: str) -> None:
        self.goal_id = goal_id
        self.current = current
        self.requested = requested
        super().__init__("goals", f"Goal {goal_id} cannot move from {current} to {requested}")
