"""Substring search algorithms sharing one contract: contains(pattern, text) -> bool."""
