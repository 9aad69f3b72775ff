# File: src/storeypark/domain/__init__.py
"""Domain layer: vehicles, the slot chain and the level aggregate."""
