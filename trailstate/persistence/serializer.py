"""
Configuration document reading and writing.

Machine configurations are exchanged as JSON in the shape

    {"initial": <state>, "states": {<state>: {"transitions": {<event>: <state>}}}}

Only configurations are serialized. Runtime history is never persisted.
"""

import json
import logging
import os
from typing import Union

from trailstate.core.definitions import MachineDefinition
from trailstate.core.errors import ConfigurationError
from trailstate.core.validations import ValidationLevel, Validator

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def loads(text: Union[str, bytes], validation: ValidationLevel = ValidationLevel.BASIC) -> MachineDefinition:
    """
    Parse a JSON configuration document.

    :param text: JSON text.
    :param validation: Validation level applied to the parsed document.
    :raises ConfigurationError: If the text is not JSON or not a valid configuration.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ConfigurationError(f"Configuration is not valid JSON: {e}") from e

    Validator(validation).validate_config(data)
    return MachineDefinition.from_dict(data)


def dumps(definition: MachineDefinition, indent: int = 2) -> str:
    """Render a definition as a JSON configuration document."""
    return json.dumps(definition.to_dict(), indent=indent)


def load(path: PathLike, validation: ValidationLevel = ValidationLevel.BASIC) -> MachineDefinition:
    """Read a JSON configuration document from `path`."""
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration '{path}': {e}") from e

    definition = loads(text, validation)
    logger.debug(f"Loaded configuration '{path}' with {len(definition.states)} states")
    return definition


def dump(definition: MachineDefinition, path: PathLike, indent: int = 2) -> None:
    """
    Write a definition to `path` as JSON.

    :raises ConfigurationError: If the file cannot be written.
    """
    text = dumps(definition, indent=indent)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.write("\n")
    except OSError as e:
        raise ConfigurationError(f"Cannot write configuration '{path}': {e}") from e
