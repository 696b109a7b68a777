"""
Stable sorting by multiple criteria that are added dynamically.
"""

from typing import Callable, Generic, Iterable, List, Tuple, TypeVar, Any, NamedTuple, Optional

from nsw.ext.ensure.argument import not_none
from nsw.ext.collection_utils.iteration import or_empty_if_none


T = TypeVar('T')

KeyFunc = Callable[[T], Any]


class SortRule(NamedTuple):
    key: KeyFunc
    ascending: bool


class Sorter(Generic[T]):
    """
    Sorts collections by an ordered list of rules, each consisting of a key function and a direction.

    Example::

        sorter = Sorter()
        sorter.add_asc(lambda user: user.name)
        sorter.add_desc(lambda user: user.age)

        sorted_users = sorter.sort(users)

    The first rule added is the primary criterion. Each subsequent rule only decides the order of items that are equal
    under all the previous rules. Items that are equal under all rules keep their original relative order (the sort is
    stable). With no rules, the items are returned in their original order.
    """
    _rules: List[SortRule]

    def __init__(self):
        self._rules = []

    @property
    def rules(self) -> Tuple[SortRule, ...]:
        return tuple(self._rules)

    def add_asc(self, key: KeyFunc) -> 'Sorter[T]':
        """Adds a rule for sorting in ascending order of the given key. Returns the sorter itself, for chaining."""
        return self._add_rule(key, True)

    def add_desc(self, key: KeyFunc) -> 'Sorter[T]':
        """Adds a rule for sorting in descending order of the given key. Returns the sorter itself, for chaining."""
        return self._add_rule(key, False)

    def _add_rule(self, key: KeyFunc, ascending: bool) -> 'Sorter[T]':
        self._rules.append(SortRule(not_none(key, 'key'), ascending))

        return self

    def sort(self, collection: Optional[Iterable[T]]) -> List[T]:
        """
        Returns a new list with the items in the collection, sorted according to the rules added so far. A None
        collection is treated as empty.
        """
        result = list(or_empty_if_none(collection))

        # Least significant rule first. list.sort() is stable in reverse mode too.
        for rule in reversed(self._rules):
            result.sort(key=rule.key, reverse=not rule.ascending)

        return result
