"""
Shared API utilities: logging setup and request dependencies
"""
