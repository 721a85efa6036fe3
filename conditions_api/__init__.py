"""Commercial conditions resolution service.

Resolves which visibility and discount rules apply to a user or company so
catalog and pricing services can consume them in a deterministic order.
"""
