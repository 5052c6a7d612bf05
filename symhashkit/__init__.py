"""Hashing, inverse hashing, demangling and collision search for hashed symbol names."""

__version__ = "0.1.0"