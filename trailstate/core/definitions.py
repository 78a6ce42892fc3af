# trailstate/core/definitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class StateDefinition:
    """Declared state and its outgoing event transitions."""

    name: str
    transitions: Dict[str, Optional[str]] = field(default_factory=dict)

    def target_for(self, event: str) -> Optional[str]:
        """
        Return the state reached by `event`, or None if the event is not defined here.

        A transition with an empty target counts as undefined. Events are
        strings; any other value matches nothing.
        """
        if not isinstance(event, str):
            return None
        target = self.transitions.get(event)
        return target or None

    def handles(self, event: str) -> bool:
        return self.target_for(event) is not None

    def to_dict(self) -> Dict[str, Any]:
        return {"transitions": dict(self.transitions)}


@dataclass(frozen=True)
class MachineDefinition:
    """
    Immutable, typed view of a machine configuration document:

        {"initial": <state>, "states": {<state>: {"transitions": {<event>: <state>}}}}

    State declaration order is preserved.
    """

    initial: str
    states: Dict[str, StateDefinition] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MachineDefinition":
        """
        Build a definition from a configuration mapping. The mapping is copied.

        :param data: A mapping already checked by the Validator.
        """
        states = {}
        for name, body in data["states"].items():
            transitions = (body or {}).get("transitions") or {}
            states[name] = StateDefinition(name=name, transitions=dict(transitions))
        return cls(initial=data["initial"], states=states)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration in its external document shape."""
        return {
            "initial": self.initial,
            "states": {name: state.to_dict() for name, state in self.states.items()},
        }

    def state_names(self) -> List[str]:
        return list(self.states)

    def get(self, name: str) -> Optional[StateDefinition]:
        return self.states.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.states
