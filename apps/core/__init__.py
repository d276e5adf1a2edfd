"""
Core app: branches, users and roles, shop profile, API errors and envelopes.
"""
