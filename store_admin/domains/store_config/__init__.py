"""
Store Configuration Domain

Configuration aggregates of an online store: domains, apps and sales
channels, shipping and delivery, and return/refund policies.
"""
