"""Classic introductory algorithms: searching, sorting, maximum subarray and matrices."""

__version__ = "0.1.0"
__all__ = ["search", "sorting", "subarray", "matrix", "cli"]