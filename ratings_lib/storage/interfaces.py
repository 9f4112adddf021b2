from typing import Any, ContextManager, Dict, Protocol, runtime_checkable


@runtime_checkable
class DocumentStoreProtocol(Protocol):
    """Public surface of `ratings_lib.storage.DocumentStore`.

    Services depend on this protocol so tests can hand them any object that
    owns a document and knows how to persist it.
    """

    def snapshot(self) -> Dict[str, Any]: ...

    def transaction(self) -> ContextManager[Dict[str, Any]]: ...

    def next_id(self, document: Dict[str, Any], kind: str) -> int: ...

    def reload(self) -> None: ...
