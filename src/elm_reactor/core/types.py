"""Core type definitions."""

from typing import NewType

# Sanitized, slash-separated path relative to the served root (e.g. "src/Main.elm").
# Distinct from filesystem Path to catch type mismatches
RequestPath = NewType("RequestPath", str)
