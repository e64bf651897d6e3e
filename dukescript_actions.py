#!/usr/bin/env python
"""
Duke Script compiler

    Use, distribution, and modification of the Duke Script compiler, source code,
    or documentation, is subject to the terms of the MIT license, as below.

    Copyright (c) 2011 Laurence Dougal Myers

    Permission is hereby granted, free of charge, to any person obtaining a copy
    of this software and associated documentation files (the "Software"), to deal
    in the Software without restriction, including without limitation the rights
    to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
    copies of the Software, and to permit persons to whom the Software is
    furnished to do so, subject to the following conditions:

    The above copyright notice and this permission notice shall be included in
    all copies or substantial portions of the Software.

    THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
    IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
    FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
    AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
    LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
    OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
    THE SOFTWARE.

Compiled script actions. A Script is a plain list of actions, a ScriptBundle
is a dict mapping script names to Scripts.

Each action lists its payload in "fields" as (attribute, serialised key) pairs,
which drives equality, repr and (de)serialisation.
"""
from dukescript_misc import DukeScriptException


class Action(object):
    fields = ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, attr) == getattr(other, attr) for attr, key in self.fields)

    __hash__ = None

    def __repr__(self):
        args = ", ".join(attr + "=" + repr(getattr(self, attr)) for attr, key in self.fields)
        return self.__class__.__name__ + "(" + args + ")"

    def serialise(self):
        serialised = {"Action": self.__class__.__name__}
        for attr, key in self.fields:
            serialised[key] = getattr(self, attr)
        return serialised

    def deserialise(self, serialised_action):
        for attr, key in self.fields:
            setattr(self, attr, serialised_action[key])


class FadeIn(Action):
    pass

class FadeOut(Action):
    pass

class WaitForUserInput(Action):
    pass

class StopNewsReporterAnimation(Action):
    pass

class DisableMenuFunctionality(Action):
    pass

class ShowKeyBindings(Action):
    pass

class EnableTextOffset(Action):
    pass

class EnableTimeOutToDemo(Action):
    pass

class ScheduleFadeInBeforeNextWaitState(Action):
    pass


class Delay(Action):
    fields = (("amount", "Amount"),)

    def __init__(self, amount=0):
        self.amount = amount

class AnimateNewsReporter(Action):
    fields = (("duration", "Duration"),)

    def __init__(self, duration=0):
        self.duration = duration

class ShowSaveSlots(Action):
    fields = (("slot", "Slot"),)

    def __init__(self, slot=0):
        self.slot = slot

class ShowMenuSelectionIndicator(Action):
    fields = (("y_pos", "Y"),)

    def __init__(self, y_pos=0):
        self.y_pos = y_pos

class ConfigurePersistentMenuSelection(Action):
    fields = (("slot", "Slot"),)

    def __init__(self, slot=0):
        self.slot = slot

class ShowFullScreenImage(Action):
    fields = (("image_name", "Image name"),)

    def __init__(self, image_name=""):
        self.image_name = image_name

class SetPalette(Action):
    fields = (("palette_file", "Palette file"),)

    def __init__(self, palette_file=""):
        self.palette_file = palette_file

class DrawSprite(Action):
    fields = (("x", "X"), ("y", "Y"), ("actor_id", "Actor"), ("frame", "Frame"))

    def __init__(self, x=0, y=0, actor_id=0, frame=0):
        self.x = x
        self.y = y
        self.actor_id = actor_id
        self.frame = frame

class DrawText(Action):
    fields = (("x", "X"), ("y", "Y"), ("text", "Text"))

    def __init__(self, x=0, y=0, text=""):
        self.x = x
        self.y = y
        self.text = text

class DrawBigText(Action):
    fields = (("x", "X"), ("y", "Y"), ("color_index", "Color index"), ("text", "Text"))

    def __init__(self, x=0, y=0, color_index=0, text=""):
        self.x = x
        self.y = y
        self.color_index = color_index
        self.text = text


class ShowMessageBox(Action):
    fields = (("y", "Y"), ("width", "Width"), ("height", "Height"), ("lines", "Lines"))

    def __init__(self, y=0, width=0, height=0, lines=None):
        self.y = y
        self.width = width
        self.height = height
        self.lines = lines if lines is not None else []


class CheckBoxDefinition(object):
    def __init__(self, y_pos=0, id=0):
        self.y_pos = y_pos
        self.id = id

    def __eq__(self, other):
        if not isinstance(other, CheckBoxDefinition):
            return NotImplemented
        return self.y_pos == other.y_pos and self.id == other.id

    __hash__ = None

    def __repr__(self):
        return "CheckBoxDefinition(y_pos=" + repr(self.y_pos) + ", id=" + repr(self.id) + ")"

    def serialise(self):
        return {"Y": self.y_pos, "ID": self.id}

    def deserialise(self, serialised_definition):
        self.y_pos = serialised_definition["Y"]
        self.id = serialised_definition["ID"]


class SetupCheckBoxes(Action):
    fields = (("x_pos", "X"), ("definitions", "Definitions"))

    def __init__(self, x_pos=0, definitions=None):
        self.x_pos = x_pos
        self.definitions = definitions if definitions is not None else []

    def serialise(self):
        return {
            "Action": self.__class__.__name__,
            "X": self.x_pos,
            "Definitions": [definition.serialise() for definition in self.definitions]
        }

    def deserialise(self, serialised_action):
        self.x_pos = serialised_action["X"]
        self.definitions = []
        for serialised_definition in serialised_action["Definitions"]:
            definition = CheckBoxDefinition()
            definition.deserialise(serialised_definition)
            self.definitions.append(definition)


class PagesDefinition(Action):
    fields = (("pages", "Pages"),)

    def __init__(self, pages=None):
        # There is always at least one page, even without any APAGE separator
        self.pages = pages if pages is not None else [[]]

    def serialise(self):
        return {
            "Action": self.__class__.__name__,
            "Pages": [serialise_script(page) for page in self.pages]
        }

    def deserialise(self, serialised_action):
        self.pages = [deserialise_script(page) for page in serialised_action["Pages"]]


action_types = dict((cls.__name__, cls) for cls in (
    FadeIn, FadeOut, WaitForUserInput, StopNewsReporterAnimation,
    DisableMenuFunctionality, ShowKeyBindings, EnableTextOffset,
    EnableTimeOutToDemo, ScheduleFadeInBeforeNextWaitState,
    Delay, AnimateNewsReporter, ShowSaveSlots, ShowMenuSelectionIndicator,
    ConfigurePersistentMenuSelection, ShowFullScreenImage, SetPalette,
    DrawSprite, DrawText, DrawBigText, ShowMessageBox, SetupCheckBoxes,
    PagesDefinition,
))


def deserialise_action(serialised_action):
    name = serialised_action.get("Action")
    if name not in action_types:
        raise DukeScriptException("Unknown action type: " + str(name))
    action = action_types[name]()
    action.deserialise(serialised_action)
    return action

def serialise_script(script):
    return [action.serialise() for action in script]

def deserialise_script(serialised_script):
    return [deserialise_action(serialised_action) for serialised_action in serialised_script]

def serialise_bundle(bundle):
    serialised_bundle = {}
    for name, script in bundle.items():
        serialised_bundle[name] = serialise_script(script)
    return serialised_bundle

def deserialise_bundle(serialised_bundle):
    bundle = {}
    for name, serialised_script in serialised_bundle.items():
        bundle[name] = deserialise_script(serialised_script)
    return bundle
