"""
Utility functions used by the EOF header reader and its tooling.
"""
