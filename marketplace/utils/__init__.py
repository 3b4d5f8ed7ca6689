"""
Utilities for marketplace service
"""
