"""Tests for the drawing engine, checked against a recording surface.

Covers: layer order, arc angles and widths, the last-minute band rule,
label text and anchoring, static face marks, and idempotence.
"""

import math

import pytest

from arctimer.face.drawing import paint_frame
from arctimer.face.geometry import time_angle
from arctimer.face.styles import DEFAULT_BRANDING, FACE_COLORS

from helpers import RecordingSurface


def _paint(second=300, initial=600, running=True, radius=100, **kw):
    surface = RecordingSurface()
    paint_frame(surface, second, initial, running, radius, **kw)
    return surface


def _arcs(surface, color):
    return [op for op in surface.named("stroke_arc") if op[-1] == color]


# ═══════════════════════════════════════════════════════════════════════════
#  LAYER ORDER
# ═══════════════════════════════════════════════════════════════════════════


class TestLayerOrder:

    def test_frame_starts_with_clear_under_identity(self):
        ops = _paint().ops
        assert ops[:4] == [
            ("save",), ("reset_transform",), ("clear",), ("restore",),
        ]

    def test_arcs_before_text_before_face(self):
        s = _paint(second=30, running=True)
        kinds = [op[0] for op in s.ops]
        first_text = kinds.index("fill_text")
        first_line = kinds.index("stroke_line")
        last_arc = max(i for i, k in enumerate(kinds) if k == "stroke_arc")
        assert last_arc < first_text < first_line

    def test_branding_is_last(self):
        s = _paint(branding="Test Clock")
        assert s.ops[-1][0] == "fill_text"
        assert s.ops[-1][1] == "Test Clock"

    def test_default_branding(self):
        s = _paint()
        assert s.ops[-1][1] == DEFAULT_BRANDING

    def test_transform_stack_balanced(self):
        s = _paint()
        assert len(s.named("save")) == len(s.named("restore"))
        depth = 0
        for op in s.ops:
            if op[0] == "save":
                depth += 1
            elif op[0] == "restore":
                depth -= 1
            assert depth >= 0
        assert depth == 0


# ═══════════════════════════════════════════════════════════════════════════
#  PRIMARY TIME ARC
# ═══════════════════════════════════════════════════════════════════════════


class TestPrimaryArc:

    def test_initial_arc_then_remaining_arc(self):
        s = _paint(second=300, initial=600)
        arcs = s.named("stroke_arc")
        assert arcs[0][-1] == FACE_COLORS["initial"]
        assert arcs[1][-1] == FACE_COLORS["remaining"]

    def test_initial_arc_geometry(self):
        s = _paint(second=300, initial=600, radius=100)
        _, x, y, r, start, end, acw, width, _ = _arcs(
            s, FACE_COLORS["initial"])[0]
        assert (x, y) == (0, 0)
        assert r == pytest.approx(40)
        assert width == pytest.approx(80)
        assert start == pytest.approx(-math.pi / 2)
        assert end == pytest.approx(time_angle(600))
        assert acw is True

    def test_remaining_arc_geometry(self):
        s = _paint(second=300, initial=600, radius=100)
        _, _, _, r, start, end, acw, width, _ = _arcs(
            s, FACE_COLORS["remaining"])[0]
        assert r == pytest.approx(40)
        assert width == pytest.approx(80)
        assert start == pytest.approx(-math.pi / 2)
        assert end == pytest.approx(-math.pi / 2 - 2 * math.pi * 300 / 3600)
        assert acw is True


# ═══════════════════════════════════════════════════════════════════════════
#  LAST-MINUTE BAND
# ═══════════════════════════════════════════════════════════════════════════


class TestLastMinuteBand:

    @pytest.mark.parametrize("second,running,present", [
        (60, True, True),
        (30, True, True),
        (0, True, True),
        (61, True, False),
        (599, True, False),
        (30, False, False),
        (0, False, False),
    ])
    def test_presence(self, second, running, present):
        s = _paint(second=second, running=running)
        assert bool(_arcs(s, FACE_COLORS["last_minute"])) is present

    def test_geometry(self):
        s = _paint(second=15, running=True, radius=100)
        (arc,) = _arcs(s, FACE_COLORS["last_minute"])
        _, _, _, r, start, end, acw, width, _ = arc
        assert r == pytest.approx(25)
        assert width == pytest.approx(50)
        assert start == pytest.approx(-math.pi / 2)
        assert end == pytest.approx(-math.pi / 2 - 2 * math.pi * 15 / 60)
        assert acw is True

    def test_drawn_over_primary_arc(self):
        s = _paint(second=15, running=True)
        colors = [op[-1] for op in s.named("stroke_arc")]
        assert colors == [
            FACE_COLORS["initial"],
            FACE_COLORS["remaining"],
            FACE_COLORS["last_minute"],
        ]


# ═══════════════════════════════════════════════════════════════════════════
#  LABELS
# ═══════════════════════════════════════════════════════════════════════════


class TestLabels:

    @pytest.mark.parametrize("second,text", [
        (125, "02:05"), (3599, "59:59"), (0, "00:00"),
    ])
    def test_time_label_text(self, second, text):
        s = _paint(second=second, initial=3600)
        assert s.named("fill_text")[0][1] == text

    def test_time_label_position(self):
        s = _paint(radius=100)
        _, _, x, y, size, _, align, baseline = s.named("fill_text")[0]
        assert x == 0
        assert y == pytest.approx(100 * 0.15 + 20)
        assert size == 20
        assert (align, baseline) == ("center", "bottom")

    def test_branding_position(self):
        s = _paint(radius=100)
        _, _, x, y, size, _, align, baseline = s.named("fill_text")[-1]
        assert x == 0
        assert y == pytest.approx(-(100 * 0.3 + 5))
        assert size == 5
        assert (align, baseline) == ("center", "bottom")

    def test_numerals(self):
        s = _paint(radius=100)
        texts = [op[1] for op in s.named("fill_text")[1:-1]]
        assert texts == [str(n) for n in range(0, 60, 5)]

    def test_numerals_are_counter_rotated(self):
        s = _paint(radius=100)
        ops = s.ops
        idx = next(i for i, op in enumerate(ops)
                   if op[0] == "fill_text" and op[1] == "5")
        rot_in, move, rot_back = ops[idx - 3], ops[idx - 2], ops[idx - 1]
        assert rot_in[0] == "rotate" and rot_back[0] == "rotate"
        assert rot_in[1] == pytest.approx(-math.pi / 6)
        assert rot_back[1] == pytest.approx(math.pi / 6)
        assert move == ("translate", 0, pytest.approx(-90))


# ═══════════════════════════════════════════════════════════════════════════
#  STATIC FACE
# ═══════════════════════════════════════════════════════════════════════════


class TestStaticFace:

    def test_tick_counts(self):
        s = _paint(radius=100)
        lines = s.named("stroke_line")
        assert len(lines) == 72
        minute = [l for l in lines if l[5] == pytest.approx(1)]
        hour = [l for l in lines if l[5] == pytest.approx(2)]
        assert len(minute) == 60
        assert len(hour) == 12

    def test_tick_spans(self):
        s = _paint(radius=100)
        lines = s.named("stroke_line")
        _, x1, y1, x2, y2, _, color, cap = lines[0]
        assert (x1, x2) == (0, 0)
        assert y1 == pytest.approx(-80)
        assert y2 == pytest.approx(-74)
        assert cap == "round"
        assert color == FACE_COLORS["ink"]
        assert lines[-1][4] == pytest.approx(-70)

    def test_minute_rotation_step(self):
        s = _paint(radius=100)
        rotations = [op[1] for op in s.named("rotate")]
        assert rotations[0] == pytest.approx(math.pi / 30)

    def test_pin(self):
        s = _paint(radius=100)
        (pin,) = s.named("fill_circle")
        assert pin == ("fill_circle", 0, 0, pytest.approx(3),
                       FACE_COLORS["ink"])


# ═══════════════════════════════════════════════════════════════════════════
#  IDEMPOTENCE
# ═══════════════════════════════════════════════════════════════════════════


class TestIdempotence:

    @pytest.mark.parametrize("second,running", [(600, False), (42, True)])
    def test_same_args_same_primitives(self, second, running):
        surface = RecordingSurface()
        paint_frame(surface, second, 600, running, 120)
        first = surface.take()
        paint_frame(surface, second, 600, running, 120)
        assert surface.take() == first

