from sources.reader import (
    Record, SourceFormatError, DEFAULT_SEPARATOR,
    is_binary_file, read_file_lines, records_from_json, records_from_lines, load_records
)


__all__ = [
    "Record", "SourceFormatError", "DEFAULT_SEPARATOR",
    "is_binary_file", "read_file_lines", "records_from_json", "records_from_lines", "load_records",
]
