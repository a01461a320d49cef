"""
Rendering and matching of TL1 messages against format trees.
"""

from tl1.templates.formatter import render
from tl1.templates.matcher import match, match_record

__all__ = ["render", "match", "match_record"]
