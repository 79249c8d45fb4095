"""
Store configuration domain layer: aggregates, sub-entities and value objects.
"""
