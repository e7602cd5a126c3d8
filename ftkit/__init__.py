"""Character, byte-buffer, string, printf, line-reading and linked-list helpers with C-library semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "convert", "strings", "strtools", "output", "printf", "reader", "linked"]