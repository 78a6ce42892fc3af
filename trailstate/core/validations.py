# trailstate/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from typing import Any

from trailstate.core.definitions import MachineDefinition
from trailstate.core.errors import ConfigurationError


class ValidationLevel(Enum):
    """Defines configuration validation depth.

    Used to choose between lazy and eager checking of state references.
    """

    BASIC = auto()  # Document shape only
    STRICT = auto()  # Shape plus referential integrity of initial and targets


class Validator:
    """
    Performs construction-time validation of machine configurations, ensuring
    the document has the expected shape and, at STRICT level, that every state
    it references is declared.
    """

    def __init__(self, level: ValidationLevel = ValidationLevel.BASIC) -> None:
        """
        :param level: How deep configuration checks go.
        """
        self._level = level
        self._rules_engine = _ValidationRulesEngine()

    @property
    def level(self) -> ValidationLevel:
        return self._level

    def validate_config(self, config: Any) -> None:
        """
        Check a configuration mapping or MachineDefinition.

        :param config: The configuration to validate.
        :raises ConfigurationError: If validation fails.
        """
        if isinstance(config, MachineDefinition):
            config = config.to_dict()
        self._rules_engine.validate_shape(config)
        if self._level is ValidationLevel.STRICT:
            self._rules_engine.validate_references(config)


class _ValidationRulesEngine:
    """
    Internal engine applying validation rules to configuration documents.
    Centralizes validation logic for easier maintenance.
    """

    def __init__(self) -> None:
        self._default_rules = _DefaultValidationRules

    def validate_shape(self, config: Any) -> None:
        self._default_rules.validate_document(config)
        for name, body in config["states"].items():
            self._default_rules.validate_state(name, body)

    def validate_references(self, config: Mapping) -> None:
        self._default_rules.validate_references(config)


class _DefaultValidationRules:
    """
    Provides built-in validation rules for the configuration document.
    """

    @staticmethod
    def validate_document(config: Any) -> None:
        """
        Check the top level of the document:
        - It must be a mapping.
        - It must name a non-empty initial state.
        - It must declare a states mapping.
        """
        if not config:
            raise ConfigurationError("config is required")
        if not isinstance(config, Mapping):
            raise ConfigurationError(f"config must be a mapping, got {type(config).__name__}")
        initial = config.get("initial")
        if not isinstance(initial, str) or not initial:
            raise ConfigurationError("config.initial must be a non-empty state name")
        if not isinstance(config.get("states"), Mapping):
            raise ConfigurationError("config.states must be a mapping of state definitions")

    @staticmethod
    def validate_state(name: Any, body: Any) -> None:
        """
        Check one state definition and its transitions table.
        """
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"config.states has an invalid state name: {name!r}")
        if body is None:
            return
        if not isinstance(body, Mapping):
            raise ConfigurationError(f"config.states.{name} must be a mapping")
        transitions = body.get("transitions")
        if transitions is None:
            return
        if not isinstance(transitions, Mapping):
            raise ConfigurationError(f"config.states.{name}.transitions must be a mapping")
        for event, target in transitions.items():
            if not isinstance(event, str) or not event:
                raise ConfigurationError(f"config.states.{name}.transitions has an invalid event name: {event!r}")
            if target is not None and not isinstance(target, str):
                raise ConfigurationError(f"config.states.{name}.transitions.{event} must be a state name")

    @staticmethod
    def validate_references(config: Mapping) -> None:
        """
        Check that the initial state and all transition targets are declared states.
        """
        states = config["states"]
        if config["initial"] not in states:
            raise ConfigurationError(f"initial state '{config['initial']}' is not specified in config states")
        for name, body in states.items():
            for event, target in ((body or {}).get("transitions") or {}).items():
                if target and target not in states:
                    raise ConfigurationError(
                        f"transition '{event}' of state '{name}' targets unknown state '{target}'"
                    )
