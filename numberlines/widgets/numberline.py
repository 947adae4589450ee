from kivy.clock import Clock
from kivy.core.text import Label
from kivy.graphics import Color, Line, Rectangle
from kivy.metrics import pt
from kivy.uix.widget import Widget

from numberlines.channel import ignore
from numberlines.constants import (
    LABEL_GAP,
    LINE_HEIGHT,
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_TOP,
    PADDING_FACTOR,
    TICK_LENGTH,
    WHEEL_STEP,
    get_font_size,
)
from numberlines.gestures.clef import DETAIL, END, MOVE, OVERVIEW, START, Brush, Pan, Resize, Wheel
from numberlines.linked.structure import Snapshot
from numberlines.utils import pmts

from numberlines.widgets.colorscheme import BLACK, CURIOUS_BLUE, CUTTY_SARK, OLD_LACE, TRANSLUCENT_BLUE, WHITE
from numberlines.widgets.utils import brush_extent, drawable_width, tick_marks

# Kivy names mouse-wheel "buttons" after the direction the content moves; we express them as DOM-style wheel deltas,
# which are positive when the wheel is rolled towards the user.
WHEEL_DELTAS = {
    'scrolldown': -WHEEL_STEP,
    'scrollup': WHEEL_STEP,
}


class NumberlineWidget(Widget):
    """
    Draws a single numberline for the domain it is told about, and translates touches on it into gestures. It never
    changes the domain itself: gestures are sent off (`send_gesture`), and the resulting state comes back in through
    `receive_snapshot`.
    """

    line = None

    def __init__(self, **kwargs):
        self._invalidated = False

        self.m = kwargs.pop('m')
        self.fractional = kwargs.pop('fractional', False)

        # Set by whoever connects us to a channel of gestures.
        self.send_gesture = ignore

        kwargs.setdefault('size_hint_y', None)
        kwargs.setdefault('height', LINE_HEIGHT)
        super(NumberlineWidget, self).__init__(**kwargs)

        # Until we receive our first snapshot, we have nothing to draw.
        self.structure = None

        Clock.schedule_interval(self.tick, 1 / 60)
        self.bind(pos=self.invalidate)
        self.bind(size=self.size_change)

    def receive_snapshot(self, data):
        pmts(data, Snapshot)
        self.structure = data.structure
        self.invalidate()

    def size_change(self, *args):
        self.send_gesture(Resize(self.line, drawable_width(self.width)))
        self.invalidate()

    def invalidate(self, *args):
        self._invalidated = True

    def set_fractional(self, fractional):
        self.fractional = fractional
        self.invalidate()

    def displayed_domain(self):
        raise NotImplementedError()

    def inner_width(self):
        return drawable_width(self.width)

    def local_x(self, touch):
        return touch.x - self.x - MARGIN_LEFT

    def baseline_y(self):
        return self.y + MARGIN_BOTTOM

    # ## Drawing
    def tick(self, dt):
        if not self._invalidated or self.structure is None:
            return

        self.canvas.clear()

        with self.canvas:
            Color(*WHITE)
            Rectangle(pos=self.pos, size=self.size)

        self.draw_under_axis()
        self._draw_axis()

        self._invalidated = False

    def draw_under_axis(self):
        pass

    def _draw_axis(self):
        width = self.inner_width()
        left = self.x + MARGIN_LEFT
        y = self.baseline_y()

        with self.canvas:
            Color(*BLACK)
            Line(points=[left, y, left + width, y], width=1)

            for x, label in tick_marks(self.displayed_domain(), width, self.fractional):
                Color(*CUTTY_SARK)
                Line(points=[left + x, y, left + x, y - TICK_LENGTH], width=1)

                texture = self._texture_for_text(label)
                Color(*BLACK)
                Rectangle(
                    pos=(left + x - texture.width / 2, y - TICK_LENGTH - LABEL_GAP - texture.height),
                    size=texture.size,
                    texture=texture)

    def _texture_for_text(self, text):
        if text in self.m.texture_for_text:
            return self.m.texture_for_text[text]

        kw = {
            'font_size': pt(get_font_size()),
            'bold': False,
            'padding_x': 0,
            'padding_y': 0,
            'padding': (0, 0)}

        label = Label(text=text, **kw)
        label.refresh()

        self.m.texture_for_text[text] = label.texture
        return label.texture

    # ## Touches
    def on_touch_down(self, touch):
        ret = super(NumberlineWidget, self).on_touch_down(touch)

        if not self.collide_point(*touch.pos):
            return ret

        if touch.is_mouse_scrolling:
            if touch.button in WHEEL_DELTAS:
                self.send_gesture(Wheel(self.line, self.local_x(touch), WHEEL_DELTAS[touch.button]))
            return True

        touch.grab(self)
        self.on_drag_start(touch)
        return True

    def on_touch_move(self, touch):
        if touch.grab_current is not self:
            return super(NumberlineWidget, self).on_touch_move(touch)

        self.on_drag(touch)
        return True

    def on_touch_up(self, touch):
        if touch.grab_current is not self:
            return super(NumberlineWidget, self).on_touch_up(touch)

        touch.ungrab(self)
        self.on_drag_end(touch)
        return True

    def on_drag_start(self, touch):
        pass

    def on_drag(self, touch):
        self.send_gesture(Pan(self.line, touch.dx))

    def on_drag_end(self, touch):
        pass


class OverviewWidget(NumberlineWidget):
    """The overview line, with the brush on it. Left-dragging brushes, right-dragging pans."""

    line = OVERVIEW

    def __init__(self, **kwargs):
        super(OverviewWidget, self).__init__(**kwargs)
        # The pixel extent of a brush in progress, for drawing
        self.brushing = None

    def displayed_domain(self):
        return self.structure.overview_domain

    def draw_under_axis(self):
        width = self.inner_width()
        if width <= 0:
            return

        if self.brushing is not None:
            x0, x1 = sorted(self.brushing)
        else:
            x0, x1 = brush_extent(self.structure.selection, self.structure.overview_domain, width)

        left = self.x + MARGIN_LEFT
        top = self.top - MARGIN_TOP
        bottom = self.baseline_y()

        with self.canvas:
            Color(*OLD_LACE)
            Rectangle(pos=(left, bottom), size=(width, top - bottom))

            Color(*TRANSLUCENT_BLUE)
            Rectangle(pos=(left + x0, bottom), size=(x1 - x0, top - bottom))

            Color(*CURIOUS_BLUE)
            Line(points=[left + x0, bottom, left + x0, top], width=1)
            Line(points=[left + x1, bottom, left + x1, top], width=1)

    def on_drag_start(self, touch):
        if touch.button == 'right':
            touch.ud['numberlines'] = 'pan'
            return

        touch.ud['numberlines'] = 'brush'
        touch.ud['brush_start'] = self.local_x(touch)
        self.send_gesture(Brush(START))

    def on_drag(self, touch):
        if touch.ud.get('numberlines') == 'pan':
            self.send_gesture(Pan(self.line, touch.dx))
            return

        self.brushing = (touch.ud['brush_start'], self.local_x(touch))
        self.invalidate()
        self.send_gesture(Brush(MOVE, self.brushing))

    def on_drag_end(self, touch):
        if touch.ud.get('numberlines') != 'brush':
            return

        start, end = touch.ud['brush_start'], self.local_x(touch)
        self.brushing = None
        self.invalidate()

        # A click without a drag clears the brush
        self.send_gesture(Brush(END, None if start == end else (start, end)))


class DetailWidget(NumberlineWidget):
    """The detail line: shows the selection (or its own zoom of it), padded. Dragging pans."""

    line = DETAIL

    def displayed_domain(self):
        return self.structure.detail_display_domain(PADDING_FACTOR)
