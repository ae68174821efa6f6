import json
from pathlib import Path
from typing import Dict

import toml
from pydantic import TypeAdapter, ValidationError

from ..models.errors import TemplateFileError

TemplateMap = Dict[str, Dict[str, str]]

_TEMPLATE_MAP = TypeAdapter(TemplateMap)


def _decode(path: Path, text: str) -> object:
    if path.suffix.lower() == ".json":
        return json.loads(text)
    try:
        return toml.loads(text)
    except toml.TomlDecodeError:
        raise
    except Exception as e:
        # the toml decoder leaks IndexError and friends on some malformed input
        raise toml.TomlDecodeError(f"{type(e).__name__}: {e}", text, 0) from e


def load_template_file(path: Path) -> TemplateMap:
    """Read and decode a template file into ``{parent: {name: template}}``.

    ``.json`` files are parsed as JSON, everything else as TOML. The whole file
    is rejected if any parent is not a table or any template is not a string.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        data = _decode(path, text)
        return _TEMPLATE_MAP.validate_python(data, strict=True)
    except (OSError, UnicodeDecodeError, toml.TomlDecodeError, json.JSONDecodeError) as e:
        raise TemplateFileError(path, str(e)) from e
    except ValidationError as e:
        raise TemplateFileError(path, f"{e.error_count()} invalid entries") from e
