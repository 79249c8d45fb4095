"""
Store configuration application layer: ports, mappers and use cases.
"""
