import unittest

from itertools import count

from nsw.ext.collection_utils.iteration import not_none_or_empty, iter_sections, split_sections, iter_page, \
    get_page, iter_ignore_nones, ignore_nones, iter_remove_where, remove_where, or_empty_if_none


class NotNoneOrEmptyTest(unittest.TestCase):
    def test_basic(self):
        self.assertFalse(not_none_or_empty(None))
        self.assertFalse(not_none_or_empty([]))
        self.assertTrue(not_none_or_empty([None]))
        self.assertTrue(not_none_or_empty(iter([1])))

    def test_with_predicate(self):
        self.assertTrue(not_none_or_empty([1, 2, 3], lambda x: x > 2))
        self.assertFalse(not_none_or_empty([1, 2, 3], lambda x: x > 3))
        self.assertFalse(not_none_or_empty(None, lambda x: True))


class SectionsTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(split_sections(range(7), 3), [(0, 1, 2), (3, 4, 5), (6,)])

    def test_exact_multiple(self):
        self.assertEqual(split_sections('abcd', 2), [('a', 'b'), ('c', 'd')])

    def test_concatenation_reproduces_input(self):
        data = list(range(23))

        self.assertEqual([item for section in split_sections(data, 5) for item in section], data)

    def test_degenerate(self):
        self.assertEqual(split_sections(None, 3), [])
        self.assertEqual(split_sections([], 3), [])
        self.assertEqual(split_sections([1, 2], 0), [])
        self.assertEqual(split_sections([1, 2], -1), [])

    def test_infinite_stream(self):
        sections = iter_sections(count(), 2)

        self.assertEqual(next(sections), (0, 1))
        self.assertEqual(next(sections), (2, 3))


class PageTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(get_page(range(10), 0, 3), [0, 1, 2])
        self.assertEqual(get_page(range(10), 1, 3), [3, 4, 5])
        self.assertEqual(get_page(range(10), 3, 3), [9])
        self.assertEqual(get_page(range(10), 4, 3), [])

    def test_invalid(self):
        self.assertEqual(get_page(None, 0, 3), [])
        self.assertEqual(get_page(range(10), -1, 3), [])
        self.assertEqual(get_page(range(10), 0, 0), [])

    def test_infinite_stream(self):
        self.assertEqual(list(iter_page(count(), 2, 2)), [4, 5])


class FilterTest(unittest.TestCase):
    def test_ignore_nones(self):
        self.assertEqual(ignore_nones([None, 'Hello World!', None, 0, 'Good bye!']), ['Hello World!', 0, 'Good bye!'])
        self.assertEqual(ignore_nones(None), [])
        self.assertEqual(list(iter_ignore_nones(iter([None]))), [])

    def test_remove_where(self):
        self.assertEqual(remove_where(range(6), lambda x: x % 2 == 0), [1, 3, 5])
        self.assertEqual(list(iter_remove_where([1, 2], lambda x: False)), [1, 2])

    def test_remove_where_none(self):
        self.assertEqual(remove_where(None, lambda x: True), [])
        self.assertEqual(remove_where([1, 2], None), [])

    def test_or_empty_if_none(self):
        data = [1]

        self.assertIs(or_empty_if_none(data), data)
        self.assertEqual(list(or_empty_if_none(None)), [])
