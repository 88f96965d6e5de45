"""
Registry of nested object types discovered during schema inference.

One registry belongs to one conversion run. Entries are keyed by the derived
type name ("UserAddress") and are never replaced once registered.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

ID_FIELD = "_id"
VERSION_FIELD = "__v"

# infer(value, field_name, owner_type_name) -> type string
InferFn = Callable[[Any, str, str], str]


@dataclass(frozen=True)
class FieldSchema:
    """Resolved GraphQL type for one field. Non-null is encoded in ``type``."""
    type: str
    required: bool


FieldMap = Dict[str, FieldSchema]


class NestedTypeRegistry:
    """
    Deduplicating store of nested object shapes.

    First write wins: a second shape registered under an existing name is
    ignored even when its members differ from the stored ones.
    """

    def __init__(self):
        self._types: Dict[str, FieldMap] = {}

    def register_if_absent(
        self,
        type_name: str,
        sample: Mapping[str, Any],
        infer: InferFn,
    ) -> bool:
        """
        Analyze ``sample`` and store it as ``type_name`` unless already known.

        Every member except the identifier and version fields is inferred with
        ``type_name`` as owner (so deeper objects get registered too) and
        marked required, since a single sample carries no presence statistics.

        Args:
            type_name: Derived nested type name
            sample: Object value observed for the field
            infer: Value type inference callback

        Returns:
            True if the type was registered by this call
        """
        if type_name in self._types:
            logger.debug(f"Nested type {type_name} already registered, keeping first shape")
            return False

        fields: FieldMap = {}
        for field_name, value in sample.items():
            if field_name in (VERSION_FIELD, ID_FIELD):
                continue
            inferred = infer(value, field_name, type_name)
            fields[field_name] = FieldSchema(type=inferred + "!", required=True)

        # Inserted after member analysis: deeper types precede their parent.
        self._types[type_name] = fields
        logger.debug(f"Registered nested type {type_name} with {len(fields)} fields")
        return True

    def get(self, type_name: str) -> Optional[FieldMap]:
        return self._types.get(type_name)

    def items(self) -> Iterator[Tuple[str, FieldMap]]:
        """Registered types in discovery order."""
        return iter(list(self._types.items()))

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __len__(self) -> int:
        return len(self._types)
