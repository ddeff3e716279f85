"""
Signal-Mind – Error Types
Configuration problems are reported to the caller; nothing here aborts a run.
"""


class SignalMindError(Exception):
    """Base class for every error raised by Signal-Mind."""


class ConfigError(SignalMindError):
    """Invalid approach or timing configuration."""


class ApproachNotFoundError(ConfigError, KeyError):
    """No approach with the requested id is registered."""

    def __init__(self, approach_id: int):
        self.approach_id = approach_id
        super().__init__(f"approach {approach_id} not found")

    def __str__(self):
        return f"approach {self.approach_id} not found"


class DuplicateApproachError(ConfigError):
    """An approach with the same id is already registered."""

    def __init__(self, approach_id: int):
        self.approach_id = approach_id
        super().__init__(f"approach {approach_id} already exists")
