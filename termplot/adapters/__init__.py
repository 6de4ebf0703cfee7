from .normalize import normalize_values

__all__ = ["normalize_values"]
