"""Artifact persistence."""

from .writer import content_hash, ensure_out_dir, format_diagnostics, write_failure, write_success

__all__ = ["content_hash", "ensure_out_dir", "format_diagnostics", "write_failure", "write_success"]
