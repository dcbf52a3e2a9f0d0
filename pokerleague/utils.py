"""JSON file helpers shared by the store and config layers."""

import json
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('pokerleague.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load a JSON file, optionally validating it against a Pydantic model.

    Args:
        path: Path to JSON file
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON, or a schema instance if a schema was given

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the JSON is malformed or fails schema validation
    """
    path = Path(path)
    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at line {e.lineno}')
        raise ValueError(f'Invalid JSON in {path}: {e.msg} at line {e.lineno}') from e

    if schema is None:
        return data

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'Schema validation failed for {path}: {e}')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def save_json(path: Path | str, data: Any, indent: int = 2) -> None:
    """
    Write data as JSON, replacing the file in one step.

    The data is written to a sibling temporary file first so a failed
    write never leaves a truncated file behind.

    Args:
        path: Path to write to
        data: JSON-serializable data or a Pydantic model
        indent: Indentation level (default: 2 spaces)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    json_data = data.model_dump(mode='json') if isinstance(data, BaseModel) else data

    tmp_path = path.with_name(path.name + '.tmp')
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, ensure_ascii=False)
            f.write('\n')
    except (TypeError, OSError):
        tmp_path.unlink(missing_ok=True)
        raise
    os.replace(tmp_path, path)
    logger.debug(f'Saved JSON to: {path}')
