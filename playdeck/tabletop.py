"""A table of two games, blackjack and Yacht, picked with the arrow keys."""

from __future__ import annotations

import enum
import random
from typing import Optional

from playdeck.blackjack import MAX_CARDS, BlackjackGame, Outcome
from playdeck.scene import DrawList, Frame, Host, Key, Scene
from playdeck.yacht import DICE_COUNT, Category, YachtGame

_GREEN = (0, 80, 0)
_WHITE = (255, 255, 255)
_RED = (255, 0, 0)
_BLUE = (0, 0, 255)

_COLUMN = 147
_SCREEN_WIDTH = 1920

_CATEGORY_KEYS = {
    Key.Q: Category.ACES,
    Key.W: Category.DEUCES,
    Key.E: Category.TREYS,
    Key.R: Category.FOURS,
    Key.T: Category.FIVES,
    Key.Y: Category.SIXES,
    Key.U: Category.CHOICE,
    Key.I: Category.FOUR_DICE,
    Key.O: Category.FULL_HOUSE,
    Key.P: Category.SMALL_STRAIGHT,
    Key.A: Category.BIG_STRAIGHT,
    Key.S: Category.YACHT,
}
_LOCK_KEYS = (Key.Z, Key.X, Key.C, Key.V, Key.B)

_CATEGORY_LABELS = (
    ("エース", 185), ("デュース", 314), ("トレイ", 471), ("フォー", 618),
    ("ファイブ", 755), ("シックス", 902), ("チョイス", 1049),
    ("フォーダイス", 1178), ("フルハウス", 1330), ("Ｓストレート", 1473),
    ("Ｂストレート", 1618), ("ヨット", 1780),
)
_KEY_LETTER_X = (202, 350, 495, 645, 790, 940, 1080, 1230, 1380, 1530, 1670, 1820)

_HELP = (
    ("エース", "1のサイコロの出目の数"),
    ("デュース", "2のサイコロの出目の数"),
    ("トレイ", "3のサイコロの出目の数"),
    ("フォー", "4のサイコロの出目の数"),
    ("ファイブ", "5のサイコロの出目の数"),
    ("シックス", "6のサイコロの出目の数"),
    ("チョイス", "全てのサイコロを足した数"),
    ("フォーダイス", "4つ同じサイコロが揃った役"),
    ("フルハウス", "3つと2つのサイコロの役"),
    ("Sストレート", "サイコロの数が4つ並んだ役", "点数:15点固定"),
    ("Bストレート", "サイコロの数が5つ並んだ役", "点数:30点固定"),
    ("ヨット", "5つ同じサイコロが揃った役", "点数:50点固定"),
)
_HELP_BOUNDS = tuple(_COLUMN * k for k in range(1, 13)) + (_SCREEN_WIDTH,)

_COMBO_MESSAGES = (
    (Category.FOUR_DICE, "フォーダイス！"),
    (Category.FULL_HOUSE, "フルハウス！"),
    (Category.SMALL_STRAIGHT, "Sストレート！"),
    (Category.BIG_STRAIGHT, "Bストレート！"),
    (Category.YACHT, "ヨット！！！"),
)

_OUTCOME_TEXT = {
    Outcome.PLAYER_BUST: (("バースト！", 750, 800), ("YOU LOSE", 750, 900)),
    Outcome.DEALER_BUST: (("ディーラーがバースト！", 350, 800), ("YOU WIN!", 750, 900)),
    Outcome.DEALER_WINS: (("YOU LOSE", 750, 900),),
    Outcome.PLAYER_WINS: (("YOU WIN!", 750, 900),),
    Outcome.BLACKJACK: (("ブラックジャック！！！！！", 200, 800), ("VICTORY!!!!", 680, 900)),
    Outcome.DRAW: (("DRAW", 850, 900),),
    Outcome.DEALER_BLACKJACK: (("ディーラーがブラックジャック", 200, 800), ("YOU LOSE...", 680, 900)),
}


class Mode(enum.Enum):
    """Which game the table is showing."""

    SELECT = 0
    BLACKJACK = 1
    YACHT = 2


class TableGame(Scene):
    """Selection screen leading to blackjack (left) or two-player Yacht (right)."""

    def __init__(self, host: Host, rng: Optional[random.Random] = None) -> None:
        super().__init__(host)
        self.rng = rng if rng is not None else random.Random()
        self.blackjack = BlackjackGame(self.rng)
        self.yacht = YachtGame(self.rng)
        self.mode = Mode.SELECT
        self.started = False
        self.music_playing = False

    def create(self) -> None:
        self.music_playing = False
        self.host.escape_key_valid = False

    def destroy(self) -> None:
        self.host.escape_key_valid = True
        self.music_playing = False
        self.mode = Mode.SELECT
        self.started = False
        self.reset()

    def reset(self) -> None:
        """Start both games afresh."""
        self.blackjack.reset()
        self.yacht.reset()

    def proc(self, frame: Frame, canvas: DrawList) -> None:
        canvas.clear(*_GREEN)
        canvas.text("十字キー左右でセレクト", 0, 1060, 70)
        canvas.line(600, 0, 1200, 1080, 10)
        canvas.text("←ブラックジャック", 50, 900, 100)
        canvas.text("ヨット→", 1400, 300, 100)

        if self.mode is Mode.SELECT:
            if frame.is_trigger(Key.LEFT):
                self.mode = Mode.BLACKJACK
            elif frame.is_trigger(Key.RIGHT):
                self.mode = Mode.YACHT

        if self.mode is Mode.BLACKJACK:
            self.music_playing = True
            if not self.started:
                self._title(frame, canvas, "ブラックジャック", 350, "21に近い方が勝利！", 500)
            if self.started:
                self._blackjack_frame(frame, canvas)
        elif self.mode is Mode.YACHT:
            self.music_playing = True
            if not self.started:
                self._title(frame, canvas, "ヨット", 700, "5つのサイコロで高得点を目指せ！", 150)
            if self.started:
                self._yacht_frame(frame, canvas)

        canvas.text("ESCキーでメニューに戻る", 1330, 50, 50)
        if frame.is_trigger(Key.ESCAPE):
            if self.mode is Mode.SELECT:
                self.host.back_to_menu()
            else:
                self.mode = Mode.SELECT
                self.started = False
                self.music_playing = False
                self.reset()

    def _title(self, frame: Frame, canvas: DrawList, name: str, name_x: float,
               tagline: str, tagline_x: float) -> None:
        canvas.clear(*_GREEN)
        canvas.text(name, name_x, 250, 150)
        canvas.text("スペースキーを押してスタート", 200, 900, 110)
        canvas.text(tagline, tagline_x, 600, 110)
        if frame.is_trigger(Key.SPACE):
            self.started = True

    # blackjack

    def _blackjack_frame(self, frame: Frame, canvas: DrawList) -> None:
        game = self.blackjack
        if not game.dealt:
            game.deal()
        canvas.clear(*_GREEN)
        self._draw_hand(canvas, game.dealer, 100)
        self._draw_hand(canvas, game.player, 1100)
        canvas.text("ディーラーの数", 100, 560, 70)
        canvas.text(game.dealer_total, 100, 650, 70)
        canvas.text("自分の数", 1100, 560, 70)
        canvas.text(game.player_total, 1100, 650, 70)
        canvas.text("VS", 850, 400, 200)
        if game.outcome is None:
            canvas.text("ヒットなら方向キー上･スタンドならenterキー", 850, 1080, 50)
            canvas.text("＊カードは5枚まで", 1475, 1020, 50)

        if frame.is_trigger(Key.UP):
            game.hit()
        if game.outcome is None and frame.is_trigger(Key.ENTER):
            game.stand()

        if game.outcome is not None:
            for message, x, y in _OUTCOME_TEXT[game.outcome]:
                canvas.text(message, x, y, 110)
            canvas.text("以降のカードが見たい場合は方向キー上", 1020, 1080, 50)
            canvas.text("方向キー下でリスタート", 1370, 1020, 50)
            if frame.is_trigger(Key.DOWN):
                self.reset()

    @staticmethod
    def _draw_hand(canvas: DrawList, cards: list, left: float) -> None:
        slots = list(cards) + [0] * (MAX_CARDS - len(cards))
        for slot, value in enumerate(slots):
            canvas.image(f"card{value}", left + 100 * slot, 50)

    # yacht

    def _yacht_frame(self, frame: Frame, canvas: DrawList) -> None:
        game = self.yacht
        self._draw_sheet(canvas)
        self._draw_help(frame, canvas)
        if game.rolls_left > 0 and game.turn != 0:
            canvas.text("引ける回数:", 600, 100, 70)
            canvas.text(game.rolls_left, 1000, 100, 70)

        if not game.rolled:
            game.dice = [self.rng.randint(1, 6) for _ in range(DICE_COUNT)]

        if frame.is_trigger(Key.ENTER) and game.rolls_left > 0 and not game.finished():
            game.roll()

        if game.rolled:
            candidates = game.candidates
            for category, message in _COMBO_MESSAGES:
                if candidates[category]:
                    canvas.text(message, 1000, 200, 70)
            for key, category in _CATEGORY_KEYS.items():
                if frame.is_trigger(key):
                    try:
                        game.assign(category)
                    except ValueError:
                        continue
                    break
            if game.rolled:
                for index, key in enumerate(_LOCK_KEYS):
                    if frame.is_trigger(key):
                        game.toggle_lock(index)

        if game.finished():
            winner = game.winner()
            message = "DRAW" if winner is None else f"{winner}Pの勝利！"
            canvas.text(message, 1100, 350, 70)

    def _draw_sheet(self, canvas: DrawList) -> None:
        game = self.yacht
        canvas.clear(*_GREEN)
        if not game.finished():
            for index, face in enumerate(game.dice):
                canvas.image(f"dice{face}", 650 + 250 * index, 200)
        canvas.line(0, 600, 1920, 600, 10)
        canvas.line(294, 0, 294, 330, 10)
        canvas.line(588, 0, 588, 600, 10)
        canvas.line(0, 330, 588, 330, 10)
        for k in range(1, 13):
            canvas.line(_COLUMN * k, 600, _COLUMN * k, 1080, 10)
        canvas.text("ボタン", 30, 1000, 30)
        for label, x in _CATEGORY_LABELS:
            canvas.text(label, x, 900, 23)
        for left in (0, 300):
            canvas.text("1〜6の小計", left, 140, 50)
            canvas.text("合計", left, 250, 50)
        for player, left in ((1, 0), (2, 300)):
            canvas.text(game.subtotal(player), left, 200, 70)
            canvas.text(game.total(player), left, 320, 70)
        for key, x in zip(_CATEGORY_KEYS, _KEY_LETTER_X):
            canvas.text(key.name, x, 1030, 70)
        if not game.finished():
            for index, key in enumerate(_LOCK_KEYS):
                canvas.text(key.name, 760 + 250 * index, 510, 70)
        if game.warning:
            canvas.text("既に数が入っています", 600, 600, 70)
        for sheet, y in zip(game.scores, (700, 800)):
            for column, value in enumerate(sheet, start=1):
                canvas.text(value or 0, _COLUMN * column + 10, y, 70)
        canvas.text("1P", 10, 700, 70)
        canvas.text("1P", 0, 70, 70)
        canvas.text("2P", 10, 800, 70)
        canvas.text("2P", 300, 70, 70)
        if game.current_player() == 1:
            canvas.text("1P", 10, 700, 70, _RED)
        else:
            canvas.text("2P", 10, 800, 70, _BLUE)

    @staticmethod
    def _draw_help(frame: Frame, canvas: DrawList) -> None:
        if frame.mouse_y < 600:
            return
        for lines, low, high in zip(_HELP, _HELP_BOUNDS, _HELP_BOUNDS[1:]):
            if low < frame.mouse_x < high:
                for row, line in enumerate(lines):
                    canvas.text(line, 0, 400 + 60 * row, 45)