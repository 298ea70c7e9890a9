"""Classic data structures: a graph, a binary heap, binary search trees and a runway schedule."""

__version__ = "0.1.0"
__all__ = ["graph", "heap", "runway", "array_bst", "linked_bst"]