import unittest

from nsw.ext.string_utils.slug import to_slug, to_slug_with_segments, to_url_friendly, remove_diacritics, \
    remap_international_char_to_ascii


class ToSlugTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(to_slug(None), '')
        self.assertEqual(to_slug(''), '')

    def test_plain(self):
        self.assertEqual(
            to_slug('The quick brown fox jumps over the lazy dog'),
            'the-quick-brown-fox-jumps-over-the-lazy-dog'
        )

    def test_symbols(self):
        self.assertEqual(
            to_slug('The price $10 is more than 10% of Rock&Roll song price.'),
            'the-price-dollar-10-is-more-than-10-percent-of-rock-and-roll-song-price'
        )
        self.assertEqual(to_slug('C# || F#'), 'c-sharp-or-f-sharp')
        self.assertEqual(to_slug('me@home'), 'me-at-home')

    def test_diacritics(self):
        self.assertEqual(
            to_slug('El zorro marrón rápido salta sobre el perro perezoso'),
            'el-zorro-marron-rapido-salta-sobre-el-perro-perezoso'
        )

    def test_delimiters(self):
        self.assertEqual(to_slug('  snake_case — and – dashes  '), 'snake-case-and-dashes')
        self.assertEqual(to_slug('!!!'), '')


class ToSlugWithSegmentsTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(to_slug_with_segments(None), '')
        self.assertEqual(to_slug_with_segments(''), '')
        self.assertEqual(
            to_slug_with_segments('The quick brown fox jumps over the lazy dog'),
            'the-quick-brown-fox-jumps-over-the-lazy-dog'
        )
        self.assertEqual(
            to_slug_with_segments('blog/1020/El zorro marrón rápido salta sobre el perro perezoso'),
            'blog/1020/el-zorro-marron-rapido-salta-sobre-el-perro-perezoso'
        )

    def test_empty_segments(self):
        self.assertEqual(to_slug_with_segments('/blog//My Post/'), 'blog/my-post')

    def test_custom_separator(self):
        self.assertEqual(to_slug_with_segments('Blog|My Post', '|'), 'blog|my-post')


class ToUrlFriendlyTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(to_url_friendly(None), '')
        self.assertEqual(to_url_friendly(''), '')

    def test_basic(self):
        self.assertEqual(to_url_friendly('Hello, World!'), 'hello-world')
        self.assertEqual(to_url_friendly('  This is the Product Title.  '), 'this-is-the-product-title')
        self.assertEqual(to_url_friendly('a_b=c/d\\e'), 'a-b-c-d-e')

    def test_international(self):
        self.assertEqual(to_url_friendly('Crème brûlée'), 'crème-brûlée')
        self.assertEqual(to_url_friendly('Crème brûlée', remap_to_ascii=True), 'creme-brulee')
        self.assertEqual(to_url_friendly('Straße', remap_to_ascii=True), 'strasse')
        self.assertEqual(to_url_friendly('日本 x', remap_to_ascii=True), 'x')

    def test_max_length(self):
        self.assertEqual(to_url_friendly('abcdef', max_length=3), 'abc')
        self.assertEqual(to_url_friendly('ab cdef', max_length=3), 'ab')
        self.assertEqual(len(to_url_friendly('word ' * 50)), 79)


class HelpersTest(unittest.TestCase):
    def test_remove_diacritics(self):
        self.assertEqual(remove_diacritics('marrón rápido'), 'marron rapido')
        self.assertEqual(remove_diacritics('Ünïcödé'), 'Unicode')

    def test_remap(self):
        self.assertEqual(remap_international_char_to_ascii('à'), 'a')
        self.assertEqual(remap_international_char_to_ascii('Ø'), 'o')
        self.assertEqual(remap_international_char_to_ascii('ł'), 'l')
        self.assertEqual(remap_international_char_to_ascii('Þ'), 'th')
        self.assertEqual(remap_international_char_to_ascii('€'), '')
