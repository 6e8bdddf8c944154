"""
Export the link network as GMNS tables
"""

from .convertor import Convertor

__all__ = ["Convertor"]
