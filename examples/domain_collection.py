"""
Domain Collection Example

This example shows how to build a domain collection on top of
CollectionValueObject, and how its in-place and new-instance operations differ.
"""

import logging

from value_collections import CollectionValueObject, EquatableModel

logging.basicConfig(level=logging.DEBUG)


class LineItem(EquatableModel):
    # Two line items are the same line when they share a SKU.
    equality_fields = ("sku",)

    sku: str
    quantity: int
    unit_price: int


class Cart(CollectionValueObject[LineItem]):
    def total(self) -> int:
        return self.reduce(
            lambda total, item: total + item.quantity * item.unit_price, 0
        )


cart = Cart(
    [
        LineItem(sku="BOOK-1", quantity=1, unit_price=30),
        LineItem(sku="PEN-7", quantity=3, unit_price=2),
    ]
)

# In-place: the cart itself changes
cart.push(LineItem(sku="MUG-2", quantity=1, unit_price=12))
print("Total after push:", cart.total())

# Membership uses the SKU, not object identity
print("Has a pen line:", LineItem(sku="PEN-7", quantity=0, unit_price=0) in cart)

cart.remove(lambda item: item.sku == "PEN-7")
print("After removing pens:", cart)

# New instance: the cart keeps its order
by_price = cart.sort(key=lambda item: item.unit_price)
print("Sorted copy:", [item.sku for item in by_price])
print("Original:", [item.sku for item in cart])
