# trailstate/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, List, Mapping, Optional, Union

from trailstate.core.definitions import MachineDefinition
from trailstate.core.errors import ConfigurationError, InvalidArgumentError, UnknownEventError, UnknownStateError
from trailstate.core.validations import ValidationLevel, Validator
from trailstate.runtime.history import HistorySnapshot, TransitionHistory

logger = logging.getLogger(__name__)


class StateMachine:
    """
    A finite state machine driven by a declarative configuration, with
    linear undo/redo over the states it has moved through.

    Not thread-safe: callers sharing an instance must serialize access.
    """

    def __init__(
        self,
        config: Union[Mapping[str, Any], MachineDefinition],
        validation: ValidationLevel = ValidationLevel.BASIC,
        validator: Optional[Validator] = None,
    ):
        """
        :param config: Configuration mapping or MachineDefinition.
        :param validation: Validation level used when no validator is given.
        :param validator: Optional validator for configuration checks. When given,
            it takes precedence and `validation` is ignored.
        :raises ConfigurationError: If the configuration is missing or invalid.
        """
        if not config:
            raise ConfigurationError("config is required")

        self._validator = validator or Validator(validation)
        self._validator.validate_config(config)

        if isinstance(config, MachineDefinition):
            self._definition = config
        else:
            self._definition = MachineDefinition.from_dict(config)

        self._current_state = self._definition.initial
        self._history = TransitionHistory()
        logger.debug(
            f"Created state machine in '{self._current_state}' with {len(self._definition.states)} states"
        )

    @property
    def definition(self) -> MachineDefinition:
        return self._definition

    @property
    def initial_state(self) -> str:
        return self._definition.initial

    @property
    def history(self) -> HistorySnapshot:
        """Copy of the recorded history sequences and the cursor."""
        return self._history.snapshot()

    @property
    def can_undo(self) -> bool:
        return self._history.peek_back() is not None

    @property
    def can_redo(self) -> bool:
        return self._history.peek_forward() is not None

    def get_state(self) -> str:
        """Return the active state."""
        return self._current_state

    def get_states(self, event: Optional[str] = None) -> List[str]:
        """
        Return the configured states in declaration order.

        :param event: If given, only states with a transition for this event.
            Non-string events match no state.
        """
        if event is None:
            return self._definition.state_names()
        return [name for name, state in self._definition.states.items() if state.handles(event)]

    def change_state(self, state: str) -> None:
        """
        Jump directly to a configured state, bypassing transition rules.

        :param state: Name of the target state.
        :raises InvalidArgumentError: If no state is given or it is not a string.
        :raises UnknownStateError: If the state is not configured.
        """
        if not state:
            logger.warning("change_state called without a state")
            raise InvalidArgumentError("state is required for change_state")
        if not isinstance(state, str):
            logger.warning(f"change_state called with a non-string state {state!r}")
            raise InvalidArgumentError(f"state must be a string, got {type(state).__name__}")
        if state not in self._definition:
            logger.warning(f"Rejected change to unknown state '{state}'")
            raise UnknownStateError(f"state: {state} is not specified in config states", state=state)

        self._move_to(state)

    def trigger(self, event: str) -> None:
        """
        Follow the current state's transition for `event`.

        :param event: Name of the event.
        :raises UnknownEventError: If the current state defines no such transition,
            including when `event` is not a string.
        """
        definition = self._definition.get(self._current_state)
        target = definition.target_for(event) if definition is not None else None
        if target is None:
            logger.warning(f"Event '{event}' is not defined for state '{self._current_state}'")
            raise UnknownEventError(
                f"Event: {event} is not specified in config for state {self._current_state}",
                event=event,
                current=self._current_state,
            )

        self._move_to(target)

    def reset(self) -> None:
        """Return to the initial state. History is left untouched."""
        logger.debug(f"Resetting from '{self._current_state}' to '{self._definition.initial}'")
        self._current_state = self._definition.initial

    def undo(self) -> bool:
        """
        Go back to the state held before the change under the cursor.

        :return: False if there is nothing to undo.
        """
        previous = self._history.step_back()
        if previous is None:
            return False

        logger.debug(f"Undo '{self._current_state}' -> '{previous}'")
        self._current_state = previous
        return True

    def redo(self) -> bool:
        """
        Re-apply the change after the cursor.

        :return: False if there is nothing to redo.
        """
        following = self._history.step_forward()
        if following is None:
            return False

        logger.debug(f"Redo '{self._current_state}' -> '{following}'")
        self._current_state = following
        return True

    def clear_history(self) -> None:
        """Forget all recorded changes."""
        self._history.clear()

    def _move_to(self, state: str) -> None:
        source = self._current_state
        self._current_state = state
        self._history.record(source, state)
        logger.debug(f"Transition '{source}' -> '{state}'")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._current_state!r}, history={len(self._history) - 1})"
