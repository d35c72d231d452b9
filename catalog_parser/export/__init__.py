"""
Export modules.

Modules:
    json_exporter - Product export to JSON / JSON Lines
"""

from .json_exporter import JSONExporter

__all__ = ['JSONExporter']
