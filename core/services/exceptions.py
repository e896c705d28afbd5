# core/services/exceptions.py

class CatalogError(Exception):
    """Base class for catalog errors"""
    pass

class NotLoggedInError(CatalogError):
    """Raised when an operation needs a logged in patron"""
    pass
