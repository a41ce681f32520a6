"""
Writer modules for TypeScale

This package contains the serializers that turn generated style definitions
into token exports (JSON, YAML, CSS, Tailwind).
"""

from .token_writer import ExportData, TokenWriter

__all__ = ['ExportData', 'TokenWriter']
