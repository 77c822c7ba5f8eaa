from invoice_builder.domain.repositories.key_value_store import PersistentStore

__all__ = ["PersistentStore"]
