"""
Storage Adapters - Where retrieved documents end up.
"""

from .file_saver import FileDocumentSaver


__all__ = ["FileDocumentSaver"]
