import json
import os
from dataclasses import dataclass
from typing import Any, Hashable, List, Optional

DEFAULT_SEPARATOR = '\t'
CHECK_SIZE = 8192


class SourceFormatError(ValueError):
    pass


@dataclass
class Record:
    """A single item loaded from a file.

    `identity` is what items are matched by, `content` is compared to detect
    updates and `label` is how the item is shown in the output.
    """

    identity: Hashable
    content: Any
    label: str


def is_binary_file(filepath: str) -> bool:
    with open(filepath, 'rb') as f:
        data = f.read(CHECK_SIZE)
    if b'\x00' in data:
        return True
    try:
        data.decode('utf-8')
    except UnicodeDecodeError as e:
        # A multibyte character cut at the end of the chunk is still text.
        return e.start < len(data) - 3
    return False


def read_file_lines(filepath: str, encoding: str = 'utf-8') -> List[str]:
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")
    if is_binary_file(filepath):
        raise SourceFormatError(f"Cannot read binary file: {filepath}")
    with open(filepath, 'r', encoding=encoding, errors='replace') as f:
        content = f.read()
    return content[:-1].split('\n') if content.endswith('\n') else (content.split('\n') if content else [])


def _freeze(value: Any) -> Hashable:
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    return value


def _label(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, ensure_ascii=False)


def records_from_json(data: Any, key: Optional[str] = None, source: str = "<json>") -> List[Record]:
    if not isinstance(data, list):
        raise SourceFormatError(f"{source}: expected a JSON array, got {type(data).__name__}")
    records = []
    for i, value in enumerate(data):
        if key is not None:
            if not isinstance(value, dict) or key not in value:
                raise SourceFormatError(f"{source}: item {i} has no {key!r} field")
            identity = _freeze(value[key])
        else:
            identity = _freeze(value)
        records.append(Record(identity=identity, content=value, label=_label(value)))
    return records


def records_from_lines(lines: List[str], separator: str = DEFAULT_SEPARATOR) -> List[Record]:
    records = []
    for line in lines:
        if separator in line:
            identity, content = line.split(separator, 1)
        else:
            identity, content = line, line
        records.append(Record(identity=identity, content=content, label=line))
    return records


def load_records(filepath: str, key: Optional[str] = None,
                 separator: str = DEFAULT_SEPARATOR, encoding: str = 'utf-8') -> List[Record]:
    """Load items from a JSON array file or a text file with one record per line.

    Files ending in `.json` (or any file when `key` is given) are parsed as
    JSON, everything else as `identity<separator>content` lines.
    """
    if key is not None or filepath.lower().endswith('.json'):
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, 'r', encoding=encoding) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise SourceFormatError(f"{filepath}: invalid JSON: {e}") from e
        return records_from_json(data, key, filepath)
    return records_from_lines(read_file_lines(filepath, encoding), separator)
