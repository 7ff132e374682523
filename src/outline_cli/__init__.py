"""
outline-cli - List and download Markdown documents from Outline.

Architecture:
- core: domain types, ports and the error hierarchy
- application: use cases composed from ports
- adapters: Outline API, local files, configuration
- cli: command line interface
"""

__version__ = "0.1.0"
