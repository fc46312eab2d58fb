"""YAML loading and parsing for rule modules."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from ..logger import LOGGER
from .errors import SchemaLoadError, SchemaValidationError
from .models import RuleModule


def load_yaml(path: str | Path) -> dict:
    """Read a rule module file into plain data; an empty file reads as ``{}``.

    Raises:
        SchemaLoadError: If the file is missing, unreadable or not YAML.
    """
    path = Path(path)
    if not path.is_file():
        reason = "Not a file" if path.exists() else "Rule module not found"
        raise SchemaLoadError(f"{reason}: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read rule module: {e}", str(path)) from e

    return _read_document(text, str(path))


def parse_module(path: str | Path) -> RuleModule:
    """Load and parse a YAML file into a RuleModule.

    The module is named after the file stem unless the file names it.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    path = Path(path)
    data = load_yaml(path)
    data.setdefault("name", path.stem)

    module = _parse_module_data(data)
    LOGGER.info("Loaded module %s with %d rule(s) from %s", module.name, len(module.rules), path)
    return module


def parse_module_from_string(yaml_string: str) -> RuleModule:
    """Parse a YAML string into a RuleModule.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    return _parse_module_data(_read_document(yaml_string))


def _read_document(text: str, path: str | None = None) -> dict:
    """The document root must be a mapping of module keys."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML in rule module: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"A rule module must be a YAML mapping, got {type(data).__name__}", path
        )
    return data


def _parse_module_data(data: dict) -> RuleModule:
    try:
        return RuleModule.model_validate(data)
    except ValidationError as e:
        errors = [
            {"loc": ".".join(map(str, err["loc"])), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Rule module has {len(errors)} invalid field(s)", errors
        ) from e
