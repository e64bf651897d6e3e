import unittest
from tests.base_test import BaseDukeScriptTest
from dukescript_actions import DrawText, DrawSprite, DrawBigText
from dukescript_misc import InvalidParameterException
from dukescript_text import decode_xytext, find_big_text_marker

class TestTextDecoder(BaseDukeScriptTest):
    def test_plain_text(self):
        self.assertEqual(DrawText(10, 20, "Hello world"), decode_xytext(10, 20, "Hello world"))

    def test_sprite(self):
        self.assertEqual(DrawSprite(7, 2, 123, 7), decode_xytext(5, 1, "\xef12307"))

    def test_sprite_with_one_digit_frame(self):
        self.assertEqual(DrawSprite(2, 1, 123, 0), decode_xytext(0, 0, "\xef1230"))

    def test_sprite_too_short(self):
        self.assertRaises(InvalidParameterException, decode_xytext, 0, 0, "\xef123")

    def test_sprite_bad_digits(self):
        self.assertRaises(InvalidParameterException, decode_xytext, 0, 0, "\xefabc12")

    def test_big_text(self):
        self.assertEqual(DrawBigText(2, 3, 7, "Hello"), decode_xytext(0, 3, "  \xf7Hello"))

    def test_big_text_colors(self):
        self.assertEqual(DrawBigText(0, 0, 0, "A"), decode_xytext(0, 0, "\xf0A"))
        self.assertEqual(DrawBigText(0, 0, 15, ""), decode_xytext(0, 0, "\xff"))

    def test_big_text_marker_wins_over_sprite(self):
        self.assertEqual(DrawBigText(11, 0, 1, "AB"), decode_xytext(10, 0, "\xef\xf1AB"))

    def test_characters_above_latin1_are_plain_text(self):
        self.assertEqual(DrawText(0, 0, "\u0100text"), decode_xytext(0, 0, "\u0100text"))
        self.assertEqual(-1, find_big_text_marker("Duke \u2014 Nukem"))

    def test_empty_payload(self):
        self.assertRaises(InvalidParameterException, decode_xytext, 0, 0, "")

    def test_find_big_text_marker(self):
        self.assertEqual(-1, find_big_text_marker("plain \xef text"))
        self.assertEqual(3, find_big_text_marker("abc\xf2\xf3"))

class TestXYTextCommand(BaseDukeScriptTest):
    def test_text_line(self):
        self.assertEqual(DrawText(10, 20, "Hello world"), self.compile_line("//XYTEXT 10 20 Hello world"))

    def test_leading_spaces_are_kept(self):
        # only one separator character is consumed after the y coordinate
        self.assertEqual(DrawText(1, 2, "  indented"), self.compile_line("//XYTEXT 1 2   indented"))

    def test_big_text_line(self):
        self.assertEqual(DrawBigText(2, 3, 7, "Hello"), self.compile_line("//XYTEXT 0 3   \xf7Hello"))

    def test_sprite_line(self):
        self.assertEqual(DrawSprite(7, 2, 123, 7), self.compile_line("//XYTEXT 5 1 \xef12307"))

    def test_text_ends_at_carriage_return(self):
        self.assertEqual(DrawText(1, 2, "Hi"), self.compile_line("//XYTEXT 1 2 Hi\rjunk"))

    def test_tabs_are_kept(self):
        self.assertEqual(DrawText(1, 2, "a\tb"), self.compile_line("//XYTEXT 1 2 a\tb"))

    def test_missing_text(self):
        self.assertRaises(InvalidParameterException, self.compile_line, "//XYTEXT 1 2")
        self.assertRaises(InvalidParameterException, self.compile_line, "//XYTEXT 1 2 ")

    def test_in_script(self):
        script = self.compile_script("//XYTEXT 3 4 \xf5Title\n//XYTEXT 3 6 Subtitle")
        self.assertEqual([DrawBigText(3, 4, 5, "Title"), DrawText(3, 6, "Subtitle")], script)

    def test_bad_coordinates(self):
        self.assertRaises(InvalidParameterException, self.compile_line, "//XYTEXT abc 5 text")
        self.assertRaises(InvalidParameterException, self.compile_line, "//XYTEXT 1 abc")
        self.assertRaises(InvalidParameterException, self.compile_line, "//XYTEXT 5.5 3 Hello")

    def test_bad_coordinates_abort_the_bundle(self):
        self.assertRaises(InvalidParameterException, self.compile, "s\n//XYTEXT x 1 Hi\n//END\n")

    def test_str_source_with_non_latin1_text(self):
        bundle = self.compile("s\n//XYTEXT 1 1 Duke \u2014 Nukem\n//END\n")
        self.assertEqual({"s": [DrawText(1, 1, "Duke \u2014 Nukem")]}, bundle)

if __name__ == '__main__':
    unittest.main()
