# File: src/storeypark/application/__init__.py
"""Application layer: service, DTOs and text responses."""
