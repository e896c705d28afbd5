from .title import TitleRepository
from .inventory import InventoryRepository
from .patron import PatronRepository
from .checkout import CheckoutRepository

__all__ = ['TitleRepository', 'InventoryRepository', 'PatronRepository', 'CheckoutRepository']
