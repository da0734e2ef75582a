"""
Core record schema, error taxonomy and field validators.
"""
