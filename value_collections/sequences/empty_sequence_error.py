class EmptySequenceError(TypeError):
    """Raised when folding an empty collection without an initial value."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"{operation}() of an empty collection with no initial value"
        )
        self.operation = operation
