"""
Unit tests for propgen-kit.
"""
