"""
Store configuration infrastructure: persistence adapters.
"""
