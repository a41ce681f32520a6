"""Configuration file parsing"""

from .config_parser import ConfigParser

__all__ = ['ConfigParser']
