# core/sa/__init__.py
from .database import Database
from .models import (
    Base, Title, InventoryItem, Patron, CheckedOut
)

__all__ = [
    'Database',
    'Base',
    'Title',
    'InventoryItem',
    'Patron',
    'CheckedOut'
]
