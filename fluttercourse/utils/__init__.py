"""Course platform utilities."""

from .manifest_loader import load_manifest, parse_manifest, read_manifest_data
from .error_messages import format_learner_error

__all__ = ["load_manifest", "parse_manifest", "read_manifest_data", "format_learner_error"]
