"""Renaming pipeline: escaping, hashing, naming strategies and rewriters."""
