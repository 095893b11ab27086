"""Classic data structures and algorithms: stacks, queues, heaps, trees and more."""

__version__ = "0.1.0"