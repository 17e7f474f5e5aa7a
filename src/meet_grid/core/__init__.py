"""Core value types and geometry helpers for the layout engine."""
