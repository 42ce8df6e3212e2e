from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Equatable(Protocol):
    """
    Contract for any element type that can live in a value-equal collection.

    Collections call `compare` wherever a semantic match is needed (`index_of`,
    `last_index_of`, `includes`, `in`). What "equal" means is entirely up to the
    implementer, e.g. comparing a business key instead of every field.

    Searching and removing behave correctly only when `compare` is reflexive
    (`x.compare(x)` is True) and symmetric.

    Example:
        ```python
        class Sku:
            def __init__(self, code: str, price: int) -> None:
                self.code = code
                self.price = price

            def compare(self, other: "Sku") -> bool:
                return self.code == other.code
        ```
    """

    def compare(self, other: Any) -> bool: ...
