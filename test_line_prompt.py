import curses
import unittest

from line_prompt import LinePrompt


class LinePromptTests(unittest.TestCase):
    def setUp(self):
        self.messages = []
        self.submitted = []
        self.prompt = LinePrompt(lambda msg, secs=3: self.messages.append(msg))

    def _type(self, text):
        for ch in text:
            self.prompt.handle_key(ord(ch))

    def test_enter_submits_stripped_text(self):
        self.prompt.start("Open: ", None, lambda text: self.submitted.append(text) or True)
        self._type(" data.csv ")
        self.prompt.handle_key(10)
        self.assertEqual(self.submitted, ["data.csv"])
        self.assertFalse(self.prompt.active)

    def test_rejected_submit_keeps_prompt_open(self):
        self.prompt.start("Save as: ", "out", lambda text: False)
        self.prompt.handle_key(10)
        self.assertTrue(self.prompt.active)
        self.assertEqual(self.prompt.buffer, "out")

    def test_escape_cancels(self):
        self.prompt.start("Find: ", "abc", lambda text: True)
        self.prompt.handle_key(27)
        self.assertFalse(self.prompt.active)
        self.assertEqual(self.messages, ["Canceled"])

    def test_cursor_editing(self):
        self.prompt.start("Find: ", "ac", lambda text: True)
        self.prompt.handle_key(curses.KEY_LEFT)
        self._type("b")
        self.assertEqual(self.prompt.buffer, "abc")
        self.prompt.handle_key(curses.KEY_HOME)
        self.prompt.handle_key(127)
        self.assertEqual(self.prompt.buffer, "abc")
        self.prompt.handle_key(curses.KEY_END)
        self.prompt.handle_key(127)
        self.assertEqual(self.prompt.buffer, "ab")


if __name__ == "__main__":
    unittest.main()
