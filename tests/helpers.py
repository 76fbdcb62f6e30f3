"""Shared test helpers for ArcTimer."""

from PyQt6.QtCore import QObject, pyqtSignal


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class RecordingSurface:
    """Surface that records every primitive as a tuple."""

    def __init__(self):
        self.ops: list[tuple] = []

    def take(self) -> list[tuple]:
        ops, self.ops = self.ops, []
        return ops

    def named(self, name: str) -> list[tuple]:
        return [op for op in self.ops if op[0] == name]

    def save(self):
        self.ops.append(("save",))

    def restore(self):
        self.ops.append(("restore",))

    def reset_transform(self):
        self.ops.append(("reset_transform",))

    def clear(self):
        self.ops.append(("clear",))

    def translate(self, dx, dy):
        self.ops.append(("translate", dx, dy))

    def rotate(self, angle):
        self.ops.append(("rotate", angle))

    def stroke_arc(self, x, y, radius, start, end, anticlockwise=False, *,
                   width, color):
        self.ops.append(
            ("stroke_arc", x, y, radius, start, end, anticlockwise,
             width, color)
        )

    def stroke_line(self, x1, y1, x2, y2, *, width, color, cap="butt"):
        self.ops.append(("stroke_line", x1, y1, x2, y2, width, color, cap))

    def fill_circle(self, x, y, radius, *, color):
        self.ops.append(("fill_circle", x, y, radius, color))

    def fill_text(self, text, x, y, *, font_size, color, align="left",
                  baseline="alphabetic"):
        self.ops.append(
            ("fill_text", text, x, y, font_size, color, align, baseline)
        )


class FakeTimer(QObject):
    """Timer collaborator driven by hand from tests."""

    tick = pyqtSignal(int)
    running_changed = pyqtSignal(bool)

    def __init__(self, initial_time: int = 600, running: bool = False):
        super().__init__()
        self.initial_time = initial_time
        self.remaining = initial_time
        self.is_running = running
        self.calls: list[str] = []

    def start(self):
        self.calls.append("start")

    def increase_minute(self):
        self.calls.append("increase_minute")

    def decrease_minute(self):
        self.calls.append("decrease_minute")

    def increase_second(self):
        self.calls.append("increase_second")

    def decrease_second(self):
        self.calls.append("decrease_second")
