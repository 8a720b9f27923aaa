"""Binary cache adapters."""

from tingly_launcher.adapters.cache.binary_cache import BinaryCache


__all__ = ["BinaryCache"]
