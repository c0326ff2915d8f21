"""Classic algorithms on arrays, strings, integers, grids, linked lists, trees and graphs."""

__version__ = "0.1.0"