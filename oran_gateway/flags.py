"""Optional read-only feature-flag store bound into the gateway's Env."""

import json
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union


class FeatureFlagStore(Protocol):
    async def get(self, key: str) -> Optional[str]: ...


class StaticFlagStore:
    """Flags held in memory, typically loaded from a JSON object on disk."""

    def __init__(self, flags: Optional[Mapping[str, object]] = None):
        # Values are stored as strings, like a key-value namespace would return them.
        self._flags = {
            str(k): v if isinstance(v, str) else json.dumps(v)
            for k, v in (flags or {}).items()
        }

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StaticFlagStore":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Feature flag file must hold a JSON object: {path}")
        return cls(data)

    async def get(self, key: str) -> Optional[str]:
        return self._flags.get(key)

    def keys(self):
        return list(self._flags)
