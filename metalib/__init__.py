"""String, output, linked-list, text-array and collision helpers."""

__version__ = "0.1.0"
__all__ = ["libc", "output", "linked_list", "ranks", "collision"]