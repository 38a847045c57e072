from .base import ALL_TYPES, SourceLoader, records_to_resources
from .builtin import BuiltInLoader
from .imported import ImportedLoader
from .local import LocalLoader
from .remote import RemoteLoader

__all__ = [
    "ALL_TYPES",
    "BuiltInLoader",
    "ImportedLoader",
    "LocalLoader",
    "RemoteLoader",
    "SourceLoader",
    "records_to_resources",
]
