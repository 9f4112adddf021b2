from typing import Any, Protocol
import json
import yaml


class Serializer(Protocol):
    """Serialize/deserialize Python values for backends that store bytes.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    """

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


class JSONSerializer:
    """Serializer using pretty-printed JSON (text).

    Non-ASCII characters are written as-is so names like "Jose" with accents
    stay readable in the document file.
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def dump(self, value: Any) -> bytes:
        return json.dumps(value, indent=self.indent, ensure_ascii=False).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"))


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    def dump(self, value: Any) -> bytes:
        return yaml.safe_dump(value, allow_unicode=True).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return yaml.safe_load(data.decode("utf-8"))
