"""
Core package providing the state machine engine.

Architecture:
- Configuration is validated once and frozen into a MachineDefinition
- StateMachine applies direct jumps and event transitions
- Every change is recorded for undo/redo

Cross-cutting:
- Errors derive from FSMError and propagate to the caller
- Diagnostics go through the standard logging module
"""

# Import order matters to avoid circular dependencies
from .errors import ConfigurationError, FSMError, InvalidArgumentError, UnknownEventError, UnknownStateError
from .definitions import MachineDefinition, StateDefinition
from .validations import ValidationLevel, Validator
from .state_machine import StateMachine

__all__ = [
    # Errors
    "FSMError",
    "ConfigurationError",
    "InvalidArgumentError",
    "UnknownStateError",
    "UnknownEventError",
    # Configuration
    "MachineDefinition",
    "StateDefinition",
    "ValidationLevel",
    "Validator",
    # Engine
    "StateMachine",
]
