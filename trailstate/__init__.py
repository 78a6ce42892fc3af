"""trailstate: finite state machine engine with undo/redo history

This package provides a small, embeddable state machine driven by a
declarative configuration of states and event transitions.

Responsibilities:
    - Current state tracking
    - Event-driven and direct state changes
    - Linear undo/redo over recorded changes
    - Configuration validation and JSON I/O

Cross-cutting Concerns:
    Thread Safety:
        - Instances are not synchronized
        - Callers sharing an instance must serialize access

    Error Handling:
        - All errors derive from FSMError
        - Undo/redo report exhaustion with False instead of raising

    Logging:
        - Module-level loggers under the "trailstate" namespace
        - No handlers are installed by the library
"""

from trailstate.core import (
    ConfigurationError,
    FSMError,
    InvalidArgumentError,
    MachineDefinition,
    StateDefinition,
    StateMachine,
    UnknownEventError,
    UnknownStateError,
    ValidationLevel,
    Validator,
)
from trailstate.runtime import HistorySnapshot

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FSMError",
    "HistorySnapshot",
    "InvalidArgumentError",
    "MachineDefinition",
    "StateDefinition",
    "StateMachine",
    "UnknownEventError",
    "UnknownStateError",
    "ValidationLevel",
    "Validator",
]
