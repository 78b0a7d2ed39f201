"""
Integration tests for mathdistance.

These tests exercise the calculator, registry, configuration and
logging together.
"""
