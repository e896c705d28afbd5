# core/sa/models/__init__.py
from .base import Base
from .title import Title
from .inventory import InventoryItem
from .patron import Patron
from .checked_out import CheckedOut

__all__ = [
    'Base',
    'Title',
    'InventoryItem',
    'Patron',
    'CheckedOut'
]
