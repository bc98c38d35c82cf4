from .state import DomainState, DomainStore, next_id

__all__ = ["DomainState", "DomainStore", "next_id"]
