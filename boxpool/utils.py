"""File I/O helpers shared by pool storage and configuration."""

import json
import logging
import os
import secrets
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .constants import SHARE_CODE_ALPHABET, SHARE_CODE_LENGTH

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('boxpool.utils')


def _read_json(path: Path) -> Any:
    if not path.is_file():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')
    text = path.read_text(encoding='utf-8')
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f'{path} is not valid JSON ({e.msg}, line {e.lineno})')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load a JSON file, validating it against a schema when one is given.

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from boxpool.schemas import BoxGridSchema
        saved = load_json('pools/office.json', schema=BoxGridSchema)
    """
    path = Path(path)
    data = _read_json(path)
    if schema is None:
        return data

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'{path} failed {schema.__name__} validation: {e.error_count()} error(s)')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def save_json(path: Path | str, data: Any, indent: int = 2) -> None:
    """
    Write JSON through a temporary file so a failed write never leaves a
    half-written pool behind. Pydantic models are dumped in JSON mode.

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = data.model_dump(mode='json') if isinstance(data, BaseModel) else data
    try:
        text = json.dumps(payload, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f'Cannot serialize data for {path}: {e}')
        raise

    tmp_path = path.with_name(path.name + '.tmp')
    try:
        tmp_path.write_text(text + '\n', encoding='utf-8')
        os.replace(tmp_path, path)
    except OSError as e:
        logger.error(f'Failed to write {path}: {e}')
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug(f'Wrote {path}')


def load_json_safe(
    path: Path | str,
    default: Any = None,
    schema: type[T] | None = None,
) -> Any | T:
    """Like load_json, but returns `default` for missing or invalid files."""
    try:
        return load_json(path, schema=schema)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        return default


def validate_json_file(
    path: Path | str,
    schema: type[T],
) -> tuple[bool, str | None]:
    """
    Check a file against a schema without raising.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        load_json(path, schema=schema)
    except FileNotFoundError:
        return False, f'File not found: {path}'
    except json.JSONDecodeError as e:
        return False, f'Invalid JSON: {e.msg} at position {e.pos}'
    except ValueError as e:
        return False, str(e)
    return True, None


def generate_share_code() -> str:
    """Random 8-character code for sharing a pool (no 0/O or 1/I look-alikes)."""
    return ''.join(secrets.choice(SHARE_CODE_ALPHABET) for _ in range(SHARE_CODE_LENGTH))
