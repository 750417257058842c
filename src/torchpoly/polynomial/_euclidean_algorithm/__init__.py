from ._euclidean import euclidean
from ._extended_euclidean import extended_euclidean

__all__ = [
    "euclidean",
    "extended_euclidean",
]
