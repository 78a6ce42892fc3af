# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "stress: mark test as a stress test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def switch_config():
    """Two-state light switch driven by events."""
    return {
        "initial": "off",
        "states": {
            "off": {"transitions": {"turnOn": "on"}},
            "on": {"transitions": {"turnOff": "off"}},
        },
    }


@pytest.fixture
def wizard_config():
    """Three-step wizard; 'reset' is handled by more than one state."""
    return {
        "initial": "start",
        "states": {
            "start": {"transitions": {"next": "details"}},
            "details": {"transitions": {"next": "confirm", "back": "start", "reset": "start"}},
            "confirm": {"transitions": {"back": "details", "reset": "start"}},
        },
    }


@pytest.fixture
def machine_factory():
    """Returns a factory building machines over states A, B and C."""
    from trailstate import StateMachine

    def _factory(initial="A", **kwargs):
        config = {
            "initial": initial,
            "states": {
                "A": {"transitions": {"go": "B"}},
                "B": {"transitions": {"go": "C"}},
                "C": {"transitions": {"go": "A"}},
            },
        }
        return StateMachine(config, **kwargs)

    return _factory
