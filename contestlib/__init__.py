"""Algorithms and data structures for programming contests: number theory, linear
programming, transforms, dates, string matching, geometry, trees and graphs."""

__version__ = "0.1.0"