"""
Bounded contexts of the store admin backend.
"""
