"""Document utilities."""

from .locator import locate_field
from .paths import convert_to_documents, flatten_path

__all__ = ["locate_field", "flatten_path", "convert_to_documents"]
