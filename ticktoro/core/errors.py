from __future__ import annotations


class TimerError(Exception):
    """Base class for session timer errors."""


class InvalidDuration(TimerError, ValueError):
    def __init__(self, value: object, unit: str, minimum: int, maximum: int | None = None) -> None:
        bounds = f"in [{minimum}, {maximum}]" if maximum is not None else f"of at least {minimum}"
        super().__init__(f"Session length must be a whole number of {unit} {bounds}, got {value!r}")
        self.value = value
        self.unit = unit


class InvalidTransition(TimerError, RuntimeError):
    def __init__(self, command: str, state: str) -> None:
        super().__init__(f"Cannot {command} while timer is {state}")
        self.command = command
        self.state = state
