"""
Ordered collections that search by value equality.

`ValueEqualSequence` is the container that owns the element storage and
implements every operation. `CollectionValueObject` is the base for concrete
domain collections, which compose a `ValueEqualSequence` and delegate to it.
Both satisfy the `SequenceOperations` protocol.
"""

from .collection_value_object import CollectionValueObject
from .empty_sequence_error import EmptySequenceError
from .sequence_operations import SequenceOperations
from .value_equal_sequence import ValueEqualSequence

__all__: list[str] = [
    "CollectionValueObject",
    "EmptySequenceError",
    "SequenceOperations",
    "ValueEqualSequence",
]
