"""Stock availability checking for stock-tracked variants."""
from typing import Protocol

from catalog_search.database.catalog_models import Stockable


class AvailabilityChecker(Protocol):
    """Anything able to tell whether a stockable item can be sold right now."""

    def is_stock_available(self, stockable: Stockable) -> bool:
        ...


class StockAvailabilityChecker:
    """Availability computed from the on-hand and on-hold quantities of the item."""

    def is_stock_available(self, stockable: Stockable) -> bool:
        return self.is_stock_sufficient(stockable, 1)

    def is_stock_sufficient(self, stockable: Stockable, quantity: int) -> bool:
        """
        Check whether the requested quantity can be taken from stock.
        
        Args:
            stockable: Stock-tracked item
            quantity: Number of units wanted
            
        Returns:
            True if the item is not tracked or enough units are free
        """
        if not stockable.tracked:
            return True
        
        # Units on hold are reserved by unpaid orders
        available = (stockable.on_hand or 0) - (stockable.on_hold or 0)
        return available >= quantity
