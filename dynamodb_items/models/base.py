"""
Item identity

``ItemBase`` describes one logical record: which table it lives in, its hash
key, its optional sort key, a type tag used in error messages and the
attribute values to write. It is built per call and never cached.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils import attributes_to_item, get_attribute_value
from .item import Item


class ItemBase(BaseModel):
    """Logical identity and attributes of a stored item.

    Invariants (checked on construction and on every field assignment):
    - ``hash_key_name`` is never empty
    - without a ``sort_key_name`` there is no ``sort_key_value``
    """

    table_name: str
    hash_key_name: str
    hash_key_value: Any = None
    sort_key_name: str = ""
    sort_key_value: Any = None
    item_type_name: str = ""
    attributes: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        validate_assignment=True
    )

    @field_validator('hash_key_name')
    @classmethod
    def validate_hash_key_name(cls, v):
        if not v:
            raise ValueError("hash key name is required")
        return v

    @model_validator(mode='after')
    def drop_orphan_sort_value(self) -> 'ItemBase':
        # the nested assignment re-runs this validator once with the value cleared
        if not self.sort_key_name and self.sort_key_value is not None:
            self.sort_key_value = None
        return self

    def resource_id(self) -> Optional[str]:
        """Hash key value as reported in mapped service errors, or None."""
        return None if self.hash_key_value is None else str(self.hash_key_value)

    def get_key(self) -> Item:
        """Primary key of this item in wire format.

        Hash and sort key values that are absent or of an unsupported type are
        left out, so a reader with only a hash key value yields a hash-only key.
        """
        key = Item()
        av = get_attribute_value(self.hash_key_value)
        if av is not None:
            key[self.hash_key_name] = av
        av = get_attribute_value(self.sort_key_value)
        if av is not None:
            key[self.sort_key_name] = av
        return key

    def get_puttable_item(self) -> Item:
        """Attributes plus key, ready for PutItem. Key values win over attributes."""
        item = attributes_to_item(self.attributes)
        return item.merge(self.get_key())

    def describe_key(self) -> str:
        return f"[{self.hash_key_value}:{self.sort_key_value}]"
