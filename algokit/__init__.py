"""Array, string and lexical-order algorithms, and bounded containers."""

__version__ = "0.1.0"
__all__ = ["allone", "arrays", "circular_deque", "custom_stack", "lexical", "strings"]