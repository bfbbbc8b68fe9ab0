"""
Flutter Course Platform - markdown lessons with progress tracking.

Subpackages:
- schemas: Pydantic models for the catalog, manifest and progress record
- classroom: loader, progress tracker, navigator and session
- viewer: markdown rendering
"""

__version__ = "0.1.0"
