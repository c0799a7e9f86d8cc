from .config import RangeSplitSettings

__all__ = ["RangeSplitSettings"]
