"""
Sales app: POS checkout, sale history and receipts.
"""
