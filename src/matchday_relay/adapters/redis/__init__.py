"""Redis adapter."""
from matchday_relay.adapters.redis.cache import RedisDurableStore, RedisFastCache

__all__ = ["RedisDurableStore", "RedisFastCache"]
