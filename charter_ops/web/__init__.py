"""
HTTP interface for charter operations
"""
