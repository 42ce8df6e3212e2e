from .deep_clone import deep_clone

__all__: list[str] = ["deep_clone"]
