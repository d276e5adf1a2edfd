"""
Procurement app: suppliers and purchases.
"""
