"""contrast_checker.core: foundation layer.

Contains the hex codec, colour model, luminance engine, type definitions,
env loading, and report builder.
This module has NO dependencies on contrast_checker.commands or contrast_checker.registry.
Only stdlib and numpy are allowed here.
"""
