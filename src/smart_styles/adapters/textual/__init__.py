"""Textual host adapter."""

from .text_area import TextAreaHost

__all__ = ["TextAreaHost"]
