"""
Core type definitions for the TL1 package.

This module contains the type aliases shared by the grammar engine, the
command layer and the session wrapper.
"""

from typing import Any

FieldName = str

# Caller supplied values for rendering an input message
ValueMapping = dict[FieldName, Any]

# One parsed output record
Record = dict[FieldName, str]

# JSON-like node description: {"node": <tag>, "fields": <payload>}
StructuredForm = dict[str, Any]
