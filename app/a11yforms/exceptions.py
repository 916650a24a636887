"""Errors raised when callers hand the renderers something they cannot draw."""
from __future__ import annotations


class FieldDescriptorError(ValueError):
    """Raised when a field descriptor or its options break the render contract.

    These are programming errors in the calling template or view, not form
    validation errors, so rendering stops instead of emitting partial markup.
    """
