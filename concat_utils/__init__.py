"""
Utility modules for the concat-text plugin.
"""

from .event_bus import EventBus
from .files import ConcatTextError, GlobError, concat_files, glob_text_files

__all__ = ["EventBus", "ConcatTextError", "GlobError", "concat_files", "glob_text_files"]
