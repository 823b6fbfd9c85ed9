# app/services/cache.py
from __future__ import annotations
import asyncio
import functools
import threading
import time
from typing import Any, Callable, Dict, Tuple

# In-process TTL caches by namespace
# value = (expires_at_epoch, stored_at_epoch, data)
_CACHES: Dict[str, Dict[Tuple[Any, ...], Tuple[float, int, Any]]] = {}
_LOCK = threading.Lock()

def _cache_for(namespace: str) -> Dict[Tuple[Any, ...], Tuple[float, int, Any]]:
    with _LOCK:
        if namespace not in _CACHES:
            _CACHES[namespace] = {}
        return _CACHES[namespace]

def _now() -> float:
    return time.time()

def _lookup(cache: Dict[Tuple[Any, ...], Tuple[float, int, Any]], key: Tuple[Any, ...], now: float):
    entry = cache.get(key)
    if entry:
        exp_at, stored_at, data = entry
        if exp_at > now:
            return entry
        cache.pop(key, None)
    return None

def clear_caches(namespace: str | None = None) -> None:
    with _LOCK:
        if namespace is None:
            for cache in _CACHES.values():
                cache.clear()
        elif namespace in _CACHES:
            _CACHES[namespace].clear()

def cache_route(
    *,
    namespace: str,
    ttl_seconds: int,
    key_builder: Callable[..., Tuple[Any, ...]],
    cache_control: str | None = None,  # defaults to public,max-age=ttl
):
    """
    Decorator for FastAPI routes (sync or async).
    - Caches the returned data by a computed key.
    - Sets X-Cache: HIT|MISS, X-Cache-Stored-At, and Cache-Control on the Response if present in kwargs.
    """
    cache = _cache_for(namespace)

    def decorator(fn: Callable):
        is_async = asyncio.iscoroutinefunction(fn)

        async def _call(*args, **kwargs):
            return await fn(*args, **kwargs) if is_async else fn(*args, **kwargs)

        def _stamp(response, state: str, stored_at: int) -> None:
            if response is None:
                return
            response.headers["X-Cache"] = state
            response.headers["X-Cache-Stored-At"] = str(stored_at)
            response.headers["Cache-Control"] = cache_control or f"public, max-age={ttl_seconds}"

        @functools.wraps(fn)
        async def wrapper(*args, **kwargs):
            response = kwargs.get("response")  # FastAPI Response if included in signature
            key = key_builder(*args, **kwargs)
            now = _now()

            entry = _lookup(cache, key, now)
            if entry:
                _stamp(response, "HIT", entry[1])
                return entry[2]

            # MISS → call downstream
            data = await _call(*args, **kwargs)
            stored_at = int(now)
            if ttl_seconds > 0:
                cache[key] = (now + ttl_seconds, stored_at, data)
            _stamp(response, "MISS", stored_at)
            return data

        return wrapper
    return decorator

def ttl_cache(
    *,
    namespace: str,
    ttl_seconds: int | Callable[[], int],
    key_builder: Callable[..., Tuple[Any, ...]],
):
    """
    Same TTL store as cache_route, for plain sync functions (upstream fetches).
    Exceptions propagate and are never cached. ttl_seconds may be a callable
    so tests and settings can change it at runtime; 0 disables caching.
    """
    cache = _cache_for(namespace)

    def decorator(fn: Callable):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            ttl = ttl_seconds() if callable(ttl_seconds) else ttl_seconds
            key = key_builder(*args, **kwargs)
            now = _now()
            if ttl > 0:
                entry = _lookup(cache, key, now)
                if entry:
                    return entry[2]
            data = fn(*args, **kwargs)
            if ttl > 0:
                cache[key] = (now + ttl, int(now), data)
            return data

        return wrapper
    return decorator

# ------------- common key helpers -------------

def key_tuple(*parts: Any) -> Tuple[Any, ...]:
    return tuple(parts)
