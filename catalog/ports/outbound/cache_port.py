from typing import Any, Optional, Protocol


class CachePort(Protocol):
    async def get(self, key: str) -> Optional[Any]: ...

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> Any: ...

    async def delete_keys(self, *keys: str) -> Any: ...
