from moderation_api.base.base_accessor import BaseAccessor, translate_store_errors

__all__ = ("BaseAccessor", "translate_store_errors")
