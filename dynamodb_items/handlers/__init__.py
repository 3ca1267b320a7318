"""
Item operations, split by direction.

- commands: ItemWriterInput (Create, Upsert, Update, Delete)
- queries: ItemReaderInput (Get, List, Scan)
"""

from .commands import ItemCreateInput, ItemWriterInput, new_item_writer_input
from .queries import ItemReaderInput, new_item_reader_input

__all__ = [
    "ItemCreateInput",
    "ItemWriterInput",
    "ItemReaderInput",
    "new_item_writer_input",
    "new_item_reader_input",
]
