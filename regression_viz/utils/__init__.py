"""
Helpers for data input, logging and rendering.
"""
