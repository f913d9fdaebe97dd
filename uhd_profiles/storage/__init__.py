"""Storage module for uhd_profiles.

Provides the JSON document codec and config path resolution.

Public Interface:
    - parse_document: Parse document text
    - serialize_document: Serialize a document tree
    - DocumentError: Codec failure
    - default_config_path: Default catalog document path
    - default_settings_path: Default settings file path
    - get_config_dir: uhd-helper configuration directory
"""

from .document import DocumentError
from .document import parse_document
from .document import serialize_document
from .paths import default_config_path
from .paths import default_settings_path
from .paths import get_config_dir

__all__ = [
    "DocumentError",
    "parse_document",
    "serialize_document",
    "default_config_path",
    "default_settings_path",
    "get_config_dir",
]
