"""Module containing the schemas for the gensync package."""

from gensync.schemas.filesystem import NodeKind, classify_node
from gensync.schemas.settings import SyncSettings

__all__ = ["NodeKind", "SyncSettings", "classify_node"]
