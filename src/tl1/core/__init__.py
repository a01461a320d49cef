"""
Core TL1 components.

This package provides the type definitions shared across the TL1 package.
"""

from tl1.core.types import FieldName, Record, StructuredForm, ValueMapping

__all__ = [
    "FieldName",
    "Record",
    "StructuredForm",
    "ValueMapping",
]
