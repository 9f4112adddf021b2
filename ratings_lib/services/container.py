from typing import Any, Dict, Iterable


class ServiceContainer:
    """A tiny, explicit DI container holding the app's singletons.

    `create_app` registers the document store and the services by name;
    routers resolve them per request through `resolve_service`.
    """

    def __init__(self) -> None:
        self._singletons: Dict[str, Any] = {}

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        try:
            return self._singletons[key]
        except KeyError:
            raise KeyError(f"No service registered for key '{key}'") from None

    def __contains__(self, key: str) -> bool:
        return key in self._singletons

    def keys(self) -> Iterable[str]:
        return list(self._singletons)
