from collections.abc import MutableSequence, Sequence
from numbers import Integral

from ..CmpAlgorithm import CmpAlgorithm


class InvalidRangeError(IndexError):
    def __init__(self, left, right, length: int) -> None:
        super().__init__(f"Invalid range [{left!r}, {right!r}] for an array of length {length}")
        self.left = left
        self.right = right
        self.length = length


class TypeMismatchError(TypeError):
    def __init__(self, left: int, right: int, msg: str) -> None:
        super().__init__(f"Elements in range [{left}, {right}] are not mutually comparable: {msg}")
        self.left = left
        self.right = right


def is_index(x) -> bool:
    return isinstance(x, Integral) and not isinstance(x, bool)


def check_range(arr: Sequence, left, right) -> None:
    if not (is_index(left) and is_index(right) and 0 <= left <= right < len(arr)):
        raise InvalidRangeError(left, right, len(arr))


def partition(arr: MutableSequence, left: int, right: int) -> int:
    """Partition ``arr[left:right + 1]`` around ``arr[left]`` in place.

    Returns the pivot's final index ``p``: everything in ``[left, p - 1]`` is
    ``<=`` the pivot and everything in ``[p + 1, right]`` is ``>`` it.
    Elements equal to the pivot always go left; the forward scan must use
    ``<=`` and the backward scan ``>`` or duplicate runs stall the cursors.

    Elements must be totally ordered. A value that is neither ``<=`` nor
    ``>`` the pivot (such as NaN) stops both cursors on the same pair again
    right after swapping it, which raises ``TypeMismatchError``.
    """
    check_range(arr, left, right)
    pivot = arr[left]
    i = left + 1
    j = right
    swapped = None
    while i <= j:
        try:
            while i <= right and arr[i] <= pivot:
                i += 1
            while j >= left and arr[j] > pivot:
                j -= 1
        except TypeError as e:
            raise TypeMismatchError(left, right, str(e)) from e
        if (i, j) == swapped:
            raise TypeMismatchError(left, right, f"elements at {i} and {j} are unordered against the pivot")
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
            swapped = (i, j)
    arr[left], arr[j] = arr[j], arr[left]
    return j


def hoare_partition(L: list) -> int:
    return partition(L, 0, len(L) - 1)


def validator(L: Sequence, p: int) -> bool:
    if not 0 <= p < len(L):
        return False
    pivot = L[p]
    return all(L[k] <= pivot for k in range(p)) and all(L[k] > pivot for k in range(p + 1, len(L)))


algorithm = CmpAlgorithm(
    "Hoare partition",
    hoare_partition,
    9,
    lower_bound=lambda N: N - 1,
    validator=validator,
)
