import unittest

from typing import NamedTuple

from nsw.ext.ensure import ArgumentNullError
from nsw.ext.collection_utils.sorter import Sorter, SortRule


class User(NamedTuple):
    name: str
    age: int


USERS = [
    User('Denis', 41),
    User('Andrei', 7),
    User('Dmitry', 41),
    User('Andrei', 63),
]


class SorterTest(unittest.TestCase):
    def test_no_rules(self):
        self.assertEqual(Sorter().sort(USERS), USERS)

    def test_single_rule(self):
        result = Sorter().add_asc(lambda user: user.age).sort(USERS)

        self.assertEqual(result, [User('Andrei', 7), User('Denis', 41), User('Dmitry', 41), User('Andrei', 63)])

    def test_asc_then_desc(self):
        sorter = Sorter()
        sorter.add_asc(lambda user: user.name)
        sorter.add_desc(lambda user: user.age)

        self.assertEqual(
            sorter.sort(USERS),
            [User('Andrei', 63), User('Andrei', 7), User('Denis', 41), User('Dmitry', 41)]
        )

    def test_desc_then_asc(self):
        result = Sorter().add_desc(lambda user: user.age).add_asc(lambda user: user.name).sort(USERS)

        self.assertEqual(result, [User('Andrei', 63), User('Denis', 41), User('Dmitry', 41), User('Andrei', 7)])

    def test_stable_in_descending_order(self):
        result = Sorter().add_desc(lambda user: user.age).sort(USERS)

        self.assertEqual(result, [User('Andrei', 63), User('Denis', 41), User('Dmitry', 41), User('Andrei', 7)])

    def test_does_not_modify_input(self):
        data = list(USERS)

        Sorter().add_asc(lambda user: user.name).sort(data)

        self.assertEqual(data, USERS)

    def test_none_collection(self):
        self.assertEqual(Sorter().sort(None), [])
        self.assertEqual(Sorter().add_asc(lambda user: user.age).sort(None), [])

    def test_accepts_streams(self):
        self.assertEqual(Sorter().add_desc(lambda x: x).sort(iter([2, 3, 1])), [3, 2, 1])

    def test_rules(self):
        key = len
        sorter = Sorter().add_desc(key)

        self.assertEqual(sorter.rules, (SortRule(key, False),))

    def test_none_key(self):
        with self.assertRaises(ArgumentNullError):
            Sorter().add_asc(None)
