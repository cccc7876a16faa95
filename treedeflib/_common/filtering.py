"""List filtering helper shared by the filtered tree definitions.

Filtering the children of every node during a traversal would copy a lot of
lists that don't need copying. ``filtered_list`` only allocates when it has to.
"""

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

# Returned whenever nothing passes, so callers never get a fresh empty list.
EMPTY: Sequence = ()


def filtered_list(unfiltered: Sequence[T], predicate: Callable[[T], bool]) -> Sequence[T]:
    """Return the elements of ``unfiltered`` which pass ``predicate``.

    Args:
        unfiltered: Sequence to filter
        predicate: Function returning True for elements to keep

    Returns:
        - ``unfiltered`` itself if every element passes (including when it is empty)
        - the shared ``EMPTY`` tuple if no element passes
        - a new list, in original order, for anything in between
    """
    num_passed = 0
    for element in unfiltered:
        if predicate(element):
            num_passed += 1

    if num_passed == len(unfiltered):
        return unfiltered
    elif num_passed == 0:
        return EMPTY
    else:
        return [element for element in unfiltered if predicate(element)]
