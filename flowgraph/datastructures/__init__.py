"""Reusable data structures backing the graph algorithms."""

from flowgraph.datastructures.heap import BinaryHeap, MaxHeap, MinHeap

__all__ = ["BinaryHeap", "MaxHeap", "MinHeap"]
