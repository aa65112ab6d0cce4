"""
Command-line interface for PROJECTSPACE.
"""
