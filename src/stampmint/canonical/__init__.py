from ._canonicalizer import canonicalize, is_valid_timestamp, normalize_timestamp

__all__ = ["canonicalize", "is_valid_timestamp", "normalize_timestamp"]
