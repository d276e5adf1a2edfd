"""
Inventory app: catalog, stock ledger and stock adjustments.
"""
