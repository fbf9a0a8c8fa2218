"""
Help Model loading.

Reads Help Model documents written by an external collaborator. A document
holds either one command object or a JSON array of command objects.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from cmdhelp.exceptions import HelpModelLoadError
from cmdhelp.schemas import CommandHelp

logger = logging.getLogger(__name__)

_command_list = TypeAdapter(List[CommandHelp])


def parse_command_help(data: Union[dict, list]) -> List[CommandHelp]:
    """Validate already-decoded JSON data into Help Model objects."""
    if isinstance(data, dict):
        return [CommandHelp.model_validate(data)]
    return _command_list.validate_python(data)


def load_command_help(path: Union[str, Path]) -> List[CommandHelp]:
    """
    Load Help Model objects from a JSON file.

    Args:
        path: JSON document with one command or a list of commands

    Returns:
        List of CommandHelp in document order

    Raises:
        HelpModelLoadError: if the file cannot be read, decoded or validated
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        commands = parse_command_help(data)
    except OSError as e:
        raise HelpModelLoadError(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise HelpModelLoadError(path, f"not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise HelpModelLoadError(path, f"invalid JSON: {e}") from e
    except ValidationError as e:
        raise HelpModelLoadError(path, f"{e.error_count()} validation error(s)\n{e}") from e

    logger.info(f"Loaded {len(commands)} command(s) from {path}")
    return commands
