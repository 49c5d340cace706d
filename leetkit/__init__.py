"""Classic algorithm problems over arrays, strings, lists, trees and graphs, with the node types they use."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "arrays",
    "designs",
    "dynamic",
    "graphs",
    "linked_lists",
    "strings",
    "structures",
    "trees",
]