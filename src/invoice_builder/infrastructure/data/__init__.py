from invoice_builder.infrastructure.data.in_memory_key_value_store import InMemoryKeyValueStore
from invoice_builder.infrastructure.data.sql_key_value_store import SqlKeyValueStore

__all__ = ["InMemoryKeyValueStore", "SqlKeyValueStore"]
