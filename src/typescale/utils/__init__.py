"""Logging, naming and font inspection helpers"""
