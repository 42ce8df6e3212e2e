"""
Equality capability for elements stored in value-equal collections.
"""

from .equatable import Equatable
from .equatable_model import EquatableModel

__all__: list[str] = ["Equatable", "EquatableModel"]
