"""Core type definitions for protoclone."""

type Copy[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Copy[T]` in a return type, no mutable state is shared with
the prototype it came from. Mutating the copy never shows through the
prototype, and mutating the prototype never shows through the copy.
"""
