from typing import List


def select_batch(start_id: int, count: int, size: int) -> List[int]:
    """
    Indices of a rotating window over a circular quiz set.

    ``index[i] = (start_id + i) % size``; a window running past the last entry
    continues from 0, and ``count > size`` repeats entries.
    """
    if size < 1:
        raise ValueError("Quiz store is empty")
    return [(start_id + i) % size for i in range(count)]
