"""
Build the link network from resolved OSM way segments
"""

from .network import NetworkBuilder

__all__ = ["NetworkBuilder"]
