"""Merge component JSON schemas into one self-contained schema."""
