"""prefsync CLI - Command-line interface layer.

This module provides:
- main: Entry point
- options: Shared Click option decorators
- output: Text and JSON output formatting
"""
