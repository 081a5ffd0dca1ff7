"""Classic algorithms and data structures in plain Python: graphs, heaps, hashing, sorting, trees and clustering."""

__version__ = "0.1.0"