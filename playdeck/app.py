"""The application: runs one scene at a time and fades between them."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from playdeck.factory import GameId, create_scene
from playdeck.scene import DrawList, Frame, Key
from playdeck.transition import TransitionEffect

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
FRAME_RATE = 60
DEFAULT_ASSETS = Path("assets")
_FONT_NAMES = "meiryo,msgothic,yugothic,notosanscjkjp,notosansjp,ipagothic,takaogothic"


class App:
    """Owns the current scene and switches to the next one behind a fade."""

    def __init__(self, assets_dir: Union[str, Path] = DEFAULT_ASSETS,
                 transition_seconds: float = 1.0, fullscreen: bool = True) -> None:
        self.assets_dir = Path(assets_dir)
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.fullscreen = fullscreen
        self.escape_key_valid = True
        self.current_game = self.next_game = GameId.MENU
        self.scene = create_scene(self.current_game, self)
        self.scene.create()
        self.transition = TransitionEffect(transition_seconds)

    def set_next_game(self, game_id: Union[GameId, int]) -> None:
        self.next_game = GameId(game_id)

    def back_to_menu(self) -> None:
        self.next_game = GameId.MENU

    def step(self, frame: Frame, canvas: DrawList) -> bool:
        """Run one frame; returns True when the scene was switched."""
        self.scene.proc(frame, canvas)
        self.transition.proc(frame.delta, canvas, self.width, self.height)
        if self.current_game == self.next_game:
            return False
        self.transition.out_start()
        if not self.transition.out_end_flag():
            return False
        self.scene.destroy()
        self.current_game = self.next_game
        self.scene = create_scene(self.current_game, self)
        self.scene.create()
        self.transition.in_start()
        return True

    def close(self) -> None:
        """Let the current scene release what it holds."""
        self.scene.destroy()

    def run(self) -> None:
        """Open a window and run the main loop until it is closed."""
        pygame.init()
        try:
            flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
            surface = pygame.display.set_mode((self.width, self.height), flags)
            screen = _Screen(surface, self.assets_dir)
            keymap = _key_map()
            clock = pygame.time.Clock()
            clock.tick()
            while True:
                delta = clock.tick(FRAME_RATE) / 1000
                frame, quit_requested = _poll(keymap, delta)
                if quit_requested or (self.escape_key_valid and frame.is_trigger(Key.ESCAPE)):
                    break
                canvas = DrawList()
                self.step(frame, canvas)
                screen.draw(canvas)
                pygame.display.flip()
        finally:
            self.close()
            pygame.quit()


def _key_map() -> dict:
    mapping = {
        pygame.K_RETURN: Key.ENTER,
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
    }
    for key in Key:
        if len(key.value) == 1:
            mapping[pygame.key.key_code(key.value)] = key
    return mapping


_MOUSE_BUTTONS = {1: Key.MOUSE_LBUTTON, 3: Key.MOUSE_RBUTTON}


def _poll(keymap: dict, delta: float) -> tuple[Frame, bool]:
    triggered, released = set(), set()
    quit_requested = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN and event.key in keymap:
            triggered.add(keymap[event.key])
        elif event.type == pygame.KEYUP and event.key in keymap:
            released.add(keymap[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button in _MOUSE_BUTTONS:
            triggered.add(_MOUSE_BUTTONS[event.button])
        elif event.type == pygame.MOUSEBUTTONUP and event.button in _MOUSE_BUTTONS:
            released.add(_MOUSE_BUTTONS[event.button])
    mouse_x, mouse_y = pygame.mouse.get_pos()
    frame = Frame(triggered=triggered, released=released,
                  mouse_x=mouse_x, mouse_y=mouse_y, delta=delta)
    return frame, quit_requested


class _Screen:
    """Replays recorded drawing onto a pygame surface."""

    def __init__(self, surface, assets_dir: Path) -> None:
        self.surface = surface
        self.assets_dir = assets_dir
        self._fonts: dict = {}
        self._images: dict = {}
        self._handlers = {
            "clear": self._clear,
            "text": self._text,
            "rect": self._rect,
            "line": self._line,
            "image": self._image,
        }

    def draw(self, canvas: DrawList) -> None:
        for command in canvas:
            self._handlers[command.kind](*command.args)

    def _clear(self, color) -> None:
        self.surface.fill(color[:3])

    def _font(self, size: float):
        size = int(size)
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(_FONT_NAMES, size)
        return self._fonts[size]

    def _text(self, value: str, x, y, size, color) -> None:
        rendered = self._font(size).render(value, True, color[:3])
        if len(color) > 3:
            rendered.set_alpha(int(color[3]))
        self.surface.blit(rendered, rendered.get_rect(bottomleft=(int(x), int(y))))

    def _rect(self, x, y, w, h, color) -> None:
        if len(color) > 3:
            overlay = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
            overlay.fill((*color[:3], int(color[3])))
            self.surface.blit(overlay, (int(x), int(y)))
        else:
            pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def _line(self, x1, y1, x2, y2, width, color) -> None:
        pygame.draw.line(self.surface, color[:3], (x1, y1), (x2, y2), max(1, int(width)))

    def _image_path(self, name: str) -> Path:
        folder = self.assets_dir / "game02"
        if name.startswith("card"):
            return folder / f"{name[len('card'):]}.png"
        return folder / f"{name}.png"

    def _image(self, name: str, x, y) -> None:
        if name not in self._images:
            try:
                self._images[name] = pygame.image.load(str(self._image_path(name)))
            except (pygame.error, FileNotFoundError):
                self._images[name] = None
        picture = self._images[name]
        if picture is not None:
            self.surface.blit(picture, (int(x), int(y)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="playdeck", description="A menu of small games.")
    parser.add_argument("--assets", type=Path, default=DEFAULT_ASSETS,
                        help="directory holding the game assets")
    parser.add_argument("--window", action="store_true", help="run in a window")
    args = parser.parse_args(argv)
    App(args.assets, fullscreen=not args.window).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())