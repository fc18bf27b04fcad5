"""Textual host: key normalization, frame rendering, and the app itself."""

from .controller import TextualEditorAdapter, TextualUIHooks, normalize_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_key"]
