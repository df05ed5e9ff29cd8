"""Core scene types: input snapshots, recorded drawing and the scene base class."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Protocol, Union

Color = tuple

WHITE = (255, 255, 255)


class Key(enum.Enum):
    """Keys and mouse buttons a scene can react to."""

    ENTER = "enter"
    ESCAPE = "escape"
    SPACE = "space"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    Q = "q"
    W = "w"
    E = "e"
    R = "r"
    T = "t"
    Y = "y"
    U = "u"
    I = "i"  # noqa: E741
    O = "o"  # noqa: E741
    P = "p"
    A = "a"
    S = "s"
    Z = "z"
    X = "x"
    C = "c"
    V = "v"
    B = "b"
    MOUSE_LBUTTON = "mouse_left"
    MOUSE_RBUTTON = "mouse_right"


@dataclass(frozen=True)
class Frame:
    """Input state for one pass of the main loop."""

    triggered: frozenset = field(default_factory=frozenset)
    released: frozenset = field(default_factory=frozenset)
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    delta: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "triggered", frozenset(self.triggered))
        object.__setattr__(self, "released", frozenset(self.released))

    def is_trigger(self, key: Key) -> bool:
        """True if the key went down during this frame."""
        return key in self.triggered

    def is_release(self, key: Key) -> bool:
        """True if the key went up during this frame."""
        return key in self.released


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing operation."""

    kind: str
    args: tuple


class DrawList:
    """Records drawing operations in the order they are issued."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def _add(self, kind: str, *args: Any) -> None:
        self.commands.append(DrawCommand(kind, args))

    def clear(self, r: int, g: int, b: int) -> None:
        """Fill the whole screen with a colour, dropping everything drawn before."""
        self.commands.clear()
        self._add("clear", (r, g, b))

    def text(self, value: Union[str, int, float], x: float, y: float,
             size: float = 50, color: Color = WHITE) -> None:
        self._add("text", str(value), x, y, size, tuple(color))

    def rect(self, x: float, y: float, w: float, h: float, color: Color = WHITE) -> None:
        self._add("rect", x, y, w, h, tuple(color))

    def line(self, x1: float, y1: float, x2: float, y2: float,
             width: float = 1, color: Color = WHITE) -> None:
        self._add("line", x1, y1, x2, y2, width, tuple(color))

    def image(self, name: str, x: float, y: float) -> None:
        self._add("image", name, x, y)

    def texts(self) -> list[str]:
        """The strings drawn so far, in drawing order."""
        return [cmd.args[0] for cmd in self.commands if cmd.kind == "text"]

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)


class Host(Protocol):
    """What a scene needs from the application running it."""

    escape_key_valid: bool

    def back_to_menu(self) -> None: ...


class Scene(abc.ABC):
    """A screen of the application: created once, run every frame, destroyed once."""

    def __init__(self, host: Host) -> None:
        self.host = host

    def create(self) -> None:
        """Prepare the scene before its first frame."""

    @abc.abstractmethod
    def proc(self, frame: Frame, canvas: DrawList) -> None:
        """Update and draw one frame."""

    def destroy(self) -> None:
        """Release what the scene holds after its last frame."""


def keys(names: Iterable[str]) -> frozenset:
    """Build a key set from key names such as 'ENTER'."""
    return frozenset(Key[name] for name in names)