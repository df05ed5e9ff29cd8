"""Simple scenes that show a title and return to the menu on a key press."""

from __future__ import annotations

from playdeck.scene import DrawList, Frame, Host, Key, Scene

_BACKGROUND = (0, 0, 64)
_YELLOW = (255, 255, 0)
_WHITE = (255, 255, 255)


class PlaceholderGame(Scene):
    """An empty game slot showing its title; ENTER goes back to the menu."""

    def __init__(self, host: Host, title: str) -> None:
        super().__init__(host)
        self.title = title

    def proc(self, frame: Frame, canvas: DrawList) -> None:
        canvas.clear(*_BACKGROUND)
        canvas.text(self.title, 0, 100, 50, _YELLOW)
        canvas.text("ENTERキーでメニューに戻る", 0, 1080, 50, _WHITE)
        if frame.is_trigger(Key.ENTER):
            self.host.back_to_menu()


class EscapeGame(Scene):
    """A game slot that takes over the escape key and shows the frame time."""

    def create(self) -> None:
        self.host.escape_key_valid = False

    def destroy(self) -> None:
        self.host.escape_key_valid = True

    def proc(self, frame: Frame, canvas: DrawList) -> None:
        canvas.clear(*_BACKGROUND)
        canvas.text(frame.delta, 0, 50, 50, _WHITE)
        canvas.text("ESCキーでメニューに戻る", 0, 1080, 50, _WHITE)
        if frame.is_trigger(Key.ESCAPE):
            self.host.back_to_menu()