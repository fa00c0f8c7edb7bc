"""Public interface for the NTFS dataset adapter."""

from __future__ import annotations

from .reader import ModelReadError, read_model
from .writer import ModelWriteError, write_model

__all__ = ["ModelReadError", "ModelWriteError", "read_model", "write_model"]
