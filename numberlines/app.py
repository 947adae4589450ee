import logging
import os

from kivy.app import App
from kivy.config import Config
from kivy.uix.behaviors.focus import FocusBehavior
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.widget import Widget

from numberlines.channel import Channel, ignore
from numberlines.gestures.clef import ResetRequest
from numberlines.gestures.interpreter import GestureInterpreter
from numberlines.linked.store import LinkedStore
from numberlines.widgets.numberline import DetailWidget, OverviewWidget

Config.set('kivy', 'exit_on_escape', '0')
# Right-clicks pan the overview; don't have them leave multitouch-emulation dots behind.
Config.set('input', 'mouse', 'mouse,multitouch_on_demand')

logger = logging.getLogger(__name__)


class Memoization(object):
    """Caches that are shared between widgets"""

    def __init__(self):
        self.texture_for_text = {}


class NumberlinesLayout(FocusBehavior, BoxLayout):

    def __init__(self, **kwargs):
        self.send_gesture = kwargs.pop('send_gesture')
        self.detail = kwargs.pop('detail')
        super(NumberlinesLayout, self).__init__(**kwargs)

    def keyboard_on_key_down(self, window, keycode, text, modifiers):
        FocusBehavior.keyboard_on_key_down(self, window, keycode, text, modifiers)

        code, textual_code = keycode

        if textual_code == 'r':
            self.send_gesture(ResetRequest())

        elif textual_code == 'f':
            self.detail.set_fractional(not self.detail.fractional)
            logger.info("Fractional ticks on the detail line: %s", self.detail.fractional)

        return True


class NumberlinesApp(App):

    def __init__(self):
        super(NumberlinesApp, self).__init__()

        self.m = Memoization()

        self.setup_channels()

    def setup_channels(self):
        # The store broadcasts snapshots of the linked state; the gesture channel carries raw input from the widgets
        # to the interpreter (which is the only one to receive on it).
        self.store = LinkedStore()
        self.gesture_channel = Channel()

        self.interpreter = GestureInterpreter(self.store)
        self.gesture_channel.connect(self.interpreter.receive)

    def add_line(self, widget):
        # send-only connection: the widget learns about the effects of its gestures through the store
        widget.send_gesture = self.gesture_channel.connect(ignore)
        self.store.connect(widget.receive_snapshot)
        widget.receive_snapshot(self.store.snapshot())
        return widget

    def build(self):
        overview = self.add_line(OverviewWidget(m=self.m))
        detail = self.add_line(DetailWidget(m=self.m, fractional=True))

        layout = NumberlinesLayout(
            orientation='vertical',
            send_gesture=self.gesture_channel.connect(ignore),
            detail=detail)

        layout.add_widget(overview)
        layout.add_widget(detail)
        layout.add_widget(Widget())  # takes up the remaining space

        layout.focus = True
        return layout


def main():
    logging.basicConfig(
        level=os.environ.get("NUMBERLINES_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    NumberlinesApp().run()


if __name__ == '__main__':
    main()
