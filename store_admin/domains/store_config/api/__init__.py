"""
Store configuration HTTP API.
"""
