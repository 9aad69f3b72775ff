"""
Unit Tests Package for the Storey Parking System

Covers the domain layer in isolation: vehicles and outcomes, the slot
chain, position strategies, the level aggregate and configuration.
"""
