"""
Store Configuration API Routes

One router per configuration aggregate, all scoped to /stores/{store_id}.
"""
