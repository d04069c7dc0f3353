"""
Contract Module

Текстовая (токенная) форма и JSON-контракт последовательностей.
"""

from .text_format import (
    TEXT_OFFSET_LABEL,
    TEXT_SEPARATOR,
    SequenceParseError,
    format_sequence,
    parse_sequence,
    parse_sequences,
    read_sequence,
    serialize_sequence,
    write_sequence,
)
from .validators import (
    SCHEMA_VERSION,
    SchemaLoader,
    SequenceDocumentValidator,
    dump_sequence_json,
    load_sequence_json,
    sequence_from_document,
    sequence_to_document,
    validate_sequence_document,
)

__all__ = [
    # Text format
    "TEXT_OFFSET_LABEL",
    "TEXT_SEPARATOR",
    "SequenceParseError",
    "format_sequence",
    "parse_sequence",
    "parse_sequences",
    "read_sequence",
    "serialize_sequence",
    "write_sequence",
    # JSON contract
    "SCHEMA_VERSION",
    "SchemaLoader",
    "SequenceDocumentValidator",
    "dump_sequence_json",
    "load_sequence_json",
    "sequence_from_document",
    "sequence_to_document",
    "validate_sequence_document",
]
