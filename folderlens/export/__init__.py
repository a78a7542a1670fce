"""Export package: tree serializers, ignore-rule transport, clipboard."""

from .clipboard import copy_to_clipboard
from .ignore_rules import (
    IGNORE_RULES_FILENAME,
    IgnoreRulesImportError,
    export_ignore_rules,
    import_ignore_rules,
)
from .serializer import (
    STRUCTURED_EXPORT_FILENAME,
    TEXT_EXPORT_FILENAME,
    SnapshotFormatError,
    node_to_dict,
    to_structured,
    to_text,
    tree_from_structured,
    write_export,
)

__all__ = [
    "copy_to_clipboard",
    "IGNORE_RULES_FILENAME",
    "IgnoreRulesImportError",
    "export_ignore_rules",
    "import_ignore_rules",
    "STRUCTURED_EXPORT_FILENAME",
    "TEXT_EXPORT_FILENAME",
    "SnapshotFormatError",
    "node_to_dict",
    "to_structured",
    "to_text",
    "tree_from_structured",
    "write_export",
]
