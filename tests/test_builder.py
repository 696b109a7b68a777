import io
import unittest

from nsw.ext.string_utils.builder import append_line_format, append_line_if, append_line_format_if, append_if, \
    append_format_if, append_if_match, append_line_if_match, append_mask, append_line_mask


class BuilderTest(unittest.TestCase):
    def setUp(self):
        self.out = io.StringIO()

    def test_append_line_format(self):
        result = append_line_format(self.out, "{0}% of {1} data", 20, 'all')

        self.assertIs(result, self.out)
        self.assertEqual(self.out.getvalue(), "20% of all data\n")

    def test_append_line_if(self):
        append_line_if(self.out, True, 'yes')
        append_line_if(self.out, False, 'no')
        append_line_if(self.out, True, 42)

        self.assertEqual(self.out.getvalue(), "yes\n42\n")

    def test_append_line_format_if(self):
        append_line_format_if(self.out, False, "{0}", 'no')
        append_line_format_if(self.out, True, "{0}-{1}", 'a', 'b')

        self.assertEqual(self.out.getvalue(), "a-b\n")

    def test_append_if(self):
        append_if(self.out, True, 'a')
        append_if(self.out, False, 'b')
        append_if(self.out, True, 'c')

        self.assertEqual(self.out.getvalue(), "ac")

    def test_append_format_if(self):
        append_format_if(self.out, True, "[{0}]", 1)
        append_format_if(self.out, False, "[{0}]", 2)

        self.assertEqual(self.out.getvalue(), "[1]")

    def test_append_if_match(self):
        append_if_match(self.out, 'Data*', 'DataSet')
        append_if_match(self.out, 'Data*', 'Table')

        self.assertEqual(self.out.getvalue(), "DataSet")

    def test_append_line_if_match(self):
        append_line_if_match(self.out, '???', 'abc')
        append_line_if_match(self.out, '???', 'abcd')

        self.assertEqual(self.out.getvalue(), "abc\n")

    def test_append_mask(self):
        append_mask(self.out, 'A###-B###', '123456')
        append_line_mask(self.out, ' (##)', '78')

        self.assertEqual(self.out.getvalue(), "A123-B456 (78)\n")

    def test_chaining(self):
        append_line_if(append_if(self.out, True, 'Header: '), True, 'value')

        self.assertEqual(self.out.getvalue(), "Header: value\n")
