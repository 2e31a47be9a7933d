"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: KML tag names, namespaces, style property vocabulary
- exceptions: Custom exception hierarchy
"""
