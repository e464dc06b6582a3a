from .delay import defer, delay

__all__ = ("defer", "delay")
