from .target import Target, TargetName

__all__ = ["Target", "TargetName"]
