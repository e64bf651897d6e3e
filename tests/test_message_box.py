import unittest
from tests.base_test import BaseDukeScriptTest
import dukescript_compiler
from dukescript_actions import ShowMessageBox, FadeOut, WaitForUserInput, Delay
from dukescript_misc import InvalidParameterException, DisallowedCommandException, MissingEndMarkerException
from dukescript_scanner import ScriptLines

class TestMessageBox(BaseDukeScriptTest):
    def test_block_ends_at_next_command(self):
        script = self.compile_script(
            "//CENTERWINDOW 4 7 30\n"
            "//CWTEXT Hi\r\n"
            "//SKLINE\n"
            "//FADEOUT")
        self.assertEqual([ShowMessageBox(4, 30, 7, ["Hi", ""]), FadeOut()], script)

    def test_height_comes_before_width(self):
        script = self.compile_script("//CENTERWINDOW 2 5 20\n//CWTEXT x")
        self.assertEqual(2, script[0].y)
        self.assertEqual(5, script[0].height)
        self.assertEqual(20, script[0].width)

    def test_block_ends_at_end_marker(self):
        bundle = self.compile("s\n//CENTERWINDOW 1 2 3\n//CWTEXT One\n//CWTEXT Two\n//END\nt\n//WAIT\n//END\n")
        self.assertEqual([ShowMessageBox(1, 3, 2, ["One", "Two"])], bundle["s"])
        self.assertEqual([WaitForUserInput()], bundle["t"])

    def test_comment_lines_inside_block(self):
        script = self.compile_script(
            "//CENTERWINDOW 1 2 3\n"
            "First line of the box\n"
            "//CWTEXT One\n"
            "\n"
            "//CWTEXT Two\n"
            "not a command\n"
            "//DELAY 5")
        self.assertEqual([ShowMessageBox(1, 3, 2, ["One", "Two"]), Delay(5)], script)

    def test_text_keeps_leading_spaces(self):
        script = self.compile_script("//CENTERWINDOW 1 2 3\n//CWTEXT    Indented")
        self.assertEqual(["   Indented"], script[0].lines)

    def test_empty_text(self):
        self.assertRaises(InvalidParameterException, self.compile_script, "//CENTERWINDOW 1 2 3\n//CWTEXT")

    def test_empty_box(self):
        script = self.compile_script("//CENTERWINDOW 1 2 3\n//CENTERWINDOW 4 5 6\n//SKLINE")
        self.assertEqual([ShowMessageBox(1, 3, 2, []), ShowMessageBox(4, 6, 5, [""])], script)

    def test_text_commands_outside_box(self):
        self.assertRaises(DisallowedCommandException, self.compile_script, "//CWTEXT Hello")
        self.assertRaises(DisallowedCommandException, self.compile_script, "//FADEIN\n//SKLINE")

    def test_box_running_to_end_of_input(self):
        self.assertRaises(MissingEndMarkerException, self.compile, "s\n//CENTERWINDOW 1 2 3\n//CWTEXT One\n")

class TestMessageBoxParser(BaseDukeScriptTest):
    def setUp(self):
        self.comp = dukescript_compiler.Compiler()

    def test_stops_at_end_of_input(self):
        lines = ScriptLines("//CWTEXT a\n//SKLINE\n//CWTEXT b")
        self.assertEqual(["a", "", "b"], self.comp.parse_message_box_text(lines))
        self.assertTrue(lines.at_end())

    def test_rewinds_to_other_command(self):
        lines = ScriptLines("//CWTEXT a\n  //WAIT\n//FADEIN")
        self.assertEqual(["a"], self.comp.parse_message_box_text(lines))
        self.assertEqual("  //WAIT", lines.next_line())

    def test_trailing_whitespace_is_trimmed(self):
        lines = ScriptLines("//CWTEXT a \x0b\rjunk")
        self.assertEqual(["a"], self.comp.parse_message_box_text(lines))

if __name__ == '__main__':
    unittest.main()
