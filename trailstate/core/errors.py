# trailstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Optional


class FSMError(Exception):
    """
    Base exception class for errors raised by the state machine library.
    """


class ConfigurationError(FSMError):
    """
    Raised when a machine configuration is missing or malformed.
    """


class InvalidArgumentError(FSMError):
    """
    Raised when a mutating call receives a missing or empty argument.
    """


class UnknownStateError(FSMError):
    """
    Raised when a requested state is not declared in the configuration.
    """

    def __init__(self, message: str, state: Optional[str] = None) -> None:
        super().__init__(message)
        self.state = state


class UnknownEventError(FSMError):
    """
    Raised when the current state defines no transition for an event.
    """

    def __init__(self, message: str, event: Optional[str] = None, current: Optional[str] = None) -> None:
        super().__init__(message)
        self.event = event
        self.current = current
