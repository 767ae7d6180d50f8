"""Pod physics, checkpoint courses and a greedy move search for a racing game."""

__version__ = "0.1.0"
__all__ = ["action", "checkpoint", "point", "pod", "race"]