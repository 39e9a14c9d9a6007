"""
Core value types and scalar math primitives.

Everything here is pure and immutable: operations return new values
and never touch shared state.
"""
