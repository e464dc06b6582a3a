from .partition import Partitioned, partition

__all__ = ("Partitioned", "partition")
