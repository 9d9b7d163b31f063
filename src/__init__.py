"""
Inventory CSV Import API
"""
