import json
import unittest
from tests.base_test import BaseDukeScriptTest
from dukescript_actions import *
from dukescript_misc import DukeScriptException

class TestSerialisation(BaseDukeScriptTest):
    def test_serialise_action(self):
        self.assertEqual({"Action": "DrawText", "X": 1, "Y": 2, "Text": "Hi"}, DrawText(1, 2, "Hi").serialise())
        self.assertEqual({"Action": "FadeIn"}, FadeIn().serialise())

    def test_serialise_nested(self):
        action = PagesDefinition([[], [SetupCheckBoxes(5, [CheckBoxDefinition(1, 2)])]])
        expected = {
            "Action": "PagesDefinition",
            "Pages": [
                [],
                [{"Action": "SetupCheckBoxes", "X": 5, "Definitions": [{"Y": 1, "ID": 2}]}]
            ]
        }
        self.assertEqual(expected, action.serialise())

    def test_bundle_through_json(self):
        bundle = self.compile(
            "Menu\n"
            "//MENU 2\n"
            "//TOGGS 30 2 5 0 6 1\n"
            "//CENTERWINDOW 3 6 28\n"
            "//CWTEXT Quit?\n"
            "//SKLINE\n"
            "//PAGESSTART\n"
            "//XYTEXT 1 1 \xef14602\n"
            "//APAGE\n"
            "//XYTEXT 1 1 \xf4Page\n"
            "//PAGESEND\n"
            "//END\n")
        text = json.dumps(serialise_bundle(bundle), indent=4)
        self.assertEqual(bundle, deserialise_bundle(json.loads(text)))

    def test_deserialise_unknown_action(self):
        self.assertRaises(DukeScriptException, deserialise_action, {"Action": "Explode"})
        self.assertRaises(DukeScriptException, deserialise_action, {})

    def test_equality(self):
        self.assertEqual(Delay(1), Delay(1))
        self.assertNotEqual(Delay(1), Delay(2))
        self.assertNotEqual(Delay(1), AnimateNewsReporter(1))
        self.assertNotEqual(FadeIn(), FadeOut())
        self.assertEqual("DrawSprite(x=0, y=0, actor_id=146, frame=0)", repr(DrawSprite(0, 0, 146, 0)))

if __name__ == '__main__':
    unittest.main()
