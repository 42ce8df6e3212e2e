"""
Value-equal collections for domain models.

This package lets a domain model expose a full ordered-sequence API (search,
transform, mutate, iterate) over its entities while replacing identity with a
domain-defined *value equality* in every search and membership operation.

The main building blocks are:

1. `Equatable`: the one-method contract (`compare`) every element type implements.
2. `EquatableModel`: a pydantic model base whose `compare` checks a business key.
3. `ValueEqualSequence`: the container that owns the element buffer.
4. `CollectionValueObject`: the base for concrete domain collections, which
   composes a `ValueEqualSequence` and delegates every operation to it.
"""

from value_collections.cloning.deep_clone import deep_clone
from value_collections.equality.equatable import Equatable
from value_collections.equality.equatable_model import EquatableModel
from value_collections.sequences.collection_value_object import (
    CollectionValueObject,
)
from value_collections.sequences.empty_sequence_error import EmptySequenceError
from value_collections.sequences.sequence_operations import SequenceOperations
from value_collections.sequences.value_equal_sequence import ValueEqualSequence

__all__: list[str] = [
    "CollectionValueObject",
    "EmptySequenceError",
    "Equatable",
    "EquatableModel",
    "SequenceOperations",
    "ValueEqualSequence",
    "deep_clone",
]
