"""Menu scene: a grid of game tiles that can be reordered and launched."""

from __future__ import annotations

import colorsys
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from playdeck.scene import DrawList, Frame, Host, Key, Scene

ROWS = 4
COLS = 4
TILE_WIDTH = 160 * 2
TILE_HEIGHT = 90 * 2
TEXT_SIZE = 40
SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

INDICES_FILE = Path("menu") / "indices.bin"
TITLE_FILE = "title.txt"

PathLike = Union[str, Path]


def move_index(indices: Sequence[int], source: int, target: int) -> list[int]:
    """Return a copy with the entry at ``source`` moved to position ``target``."""
    items = list(indices)
    for name, position in (("source", source), ("target", target)):
        if not 0 <= position < len(items):
            raise IndexError(f"{name} position out of range: {position}")
    items.insert(target, items.pop(source))
    return items


def load_indices(path: PathLike, count: int) -> list[int]:
    """Read the tile order; a missing file gives 0..count-1, a short one is padded with 0."""
    try:
        data = Path(path).read_bytes()[:count]
    except OSError:
        return list(range(count))
    return list(data) + [0] * (count - len(data))


def save_indices(path: PathLike, indices: Iterable[int]) -> None:
    """Write the tile order, one byte per tile."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(bytes(indices))


def load_titles(assets_dir: PathLike, count: int) -> list[str]:
    """Read the first line of each game's title file; missing files give empty titles."""
    titles = []
    for number in range(count):
        path = Path(assets_dir) / f"game{number:02d}" / TITLE_FILE
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError):
            lines = []
        titles.append(lines[0] if lines else "")
    return titles


def _hsv(hue: float, saturation: float, value: float) -> tuple:
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360, saturation / 255, value / 255)
    return (round(r * 255), round(g * 255), round(b * 255))


class Menu(Scene):
    """Grid of games: left click launches one, right-button drag reorders them."""

    def __init__(self, host: Host, assets_dir: PathLike,
                 width: float = SCREEN_WIDTH, height: float = SCREEN_HEIGHT) -> None:
        super().__init__(host)
        self.assets_dir = Path(assets_dir)
        self.rows = ROWS
        self.cols = COLS
        self.tile_w = TILE_WIDTH
        self.tile_h = TILE_HEIGHT
        self.ofst_x = (width - self.tile_w * self.cols) / 2
        self.ofst_y = (height - self.tile_h * self.rows) / 2
        self.div_hue = 360 / (self.cols * self.rows)
        self.text_size = TEXT_SIZE
        count = self.rows * self.cols
        self.indices: list[int] = list(range(count))
        self.titles: list[str] = [""] * count
        self.holding: Optional[int] = None
        self.hover: Optional[int] = None

    @property
    def indices_path(self) -> Path:
        return self.assets_dir / INDICES_FILE

    def create(self) -> None:
        count = self.rows * self.cols
        self.holding = None
        self.hover = None
        self.indices = load_indices(self.indices_path, count)
        self.titles = load_titles(self.assets_dir, count)

    def destroy(self) -> None:
        save_indices(self.indices_path, self.indices)

    def tile_at(self, x: float, y: float) -> Optional[int]:
        """The tile position under a point, or None outside the grid."""
        right = self.ofst_x + self.tile_w * self.cols
        bottom = self.ofst_y + self.tile_h * self.rows
        if not (self.ofst_x <= x <= right and self.ofst_y <= y <= bottom):
            return None
        col = min(int((x - self.ofst_x) // self.tile_w), self.cols - 1)
        row = min(int((y - self.ofst_y) // self.tile_h), self.rows - 1)
        return self.cols * row + col

    def proc(self, frame: Frame, canvas: DrawList) -> None:
        self._rearrange(frame)
        self._draw(frame, canvas)
        if frame.is_trigger(Key.MOUSE_LBUTTON) and self.hover is not None:
            self.host.set_next_game(self.indices[self.hover])

    def _rearrange(self, frame: Frame) -> None:
        self.hover = self.tile_at(frame.mouse_x, frame.mouse_y)
        if self.hover is None:
            self.holding = None
            return
        if frame.is_trigger(Key.MOUSE_RBUTTON):
            self.holding = self.hover
        if frame.is_release(Key.MOUSE_RBUTTON) and self.holding is not None:
            self.indices = move_index(self.indices, self.holding, self.hover)
            self.holding = None

    def _title_of(self, position: int) -> str:
        game = self.indices[position]
        return self.titles[game] if 0 <= game < len(self.titles) else ""

    def _draw(self, frame: Frame, canvas: DrawList) -> None:
        canvas.clear(0, 0, 0)
        canvas.text("Menu", self.ofst_x, self.ofst_y, self.text_size, _hsv(0, 0, 255))
        for row in range(self.rows):
            for col in range(self.cols):
                index = self.cols * row + col
                saturation, value = (128, 255) if index == self.hover else (255, 160)
                px = self.tile_w * col + self.ofst_x
                py = self.tile_h * row + self.ofst_y
                canvas.rect(px, py, self.tile_w, self.tile_h,
                            _hsv(self.div_hue * index, saturation, value))
                canvas.text(self._title_of(index), px + 10, py + 10 + self.text_size,
                            self.text_size, (0, 0, 0))
        if self.holding is not None:
            canvas.text(self._title_of(self.holding), frame.mouse_x, frame.mouse_y,
                        self.text_size, (128, 128, 128))