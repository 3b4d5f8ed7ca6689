"""
Marketplace Service

Registration, login, role selection and profile completion for the
services marketplace demo backend.
"""

__version__ = "1.0.0"
