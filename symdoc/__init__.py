"""
symdoc - Markdown interface documentation from Swift symbol graphs.
"""

__version__ = "0.3.0"
