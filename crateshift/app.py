"""Game screens, mouse hit areas and the main event loop."""

from __future__ import annotations

import argparse
from enum import Enum, auto
from pathlib import Path

import pygame

from .level import LevelProgress, level_at, level_rect, load_map_file
from .movement import Board, Direction
from .render import PIXEL, Renderer, create_window

UNDO_TIMES = 3
START_BUTTON_RECT = (250, 270, 100, 100)
LEVEL_TITLE_RECT = (70, 20, 150, 50)
MUSIC_FILE = "background_music.mp3"

_KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_UP: Direction.UP,
}


class OptionChoice(Enum):
    """Buttons on the pause board."""

    RESUME = auto()
    RESTART = auto()
    MENU = auto()


class WinChoice(Enum):
    """Buttons on the level-complete board."""

    NEXT = auto()
    MENU = auto()


class _Stage(Enum):
    START = auto()
    MENU = auto()
    PLAY = auto()
    OPTION = auto()
    WIN = auto()


def _inside(x: int, y: int, left: int, top: int, right: int, bottom: int) -> bool:
    return left <= x <= right and top <= y <= bottom


def hit_undo(x: int, y: int) -> bool:
    """Whether the point lies on the undo button."""
    return _inside(x, y, 550, 20, 570, 40)


def hit_music(x: int, y: int) -> bool:
    """Whether the point lies on the speaker button."""
    return _inside(x, y, 450, 15, 480, 45)


def hit_menu(x: int, y: int) -> bool:
    """Whether the point lies on the pause-menu button."""
    return _inside(x, y, 497, 15, 534, 52)


def option_choice(x: int, y: int) -> OptionChoice | None:
    """The pause-board button under the point, if any."""
    if not 212 <= x <= 388:
        return None
    if 122 <= y <= 162:
        return OptionChoice.RESUME
    if 181 <= y <= 220:
        return OptionChoice.RESTART
    if 238 <= y <= 277:
        return OptionChoice.MENU
    return None


def win_choice(x: int, y: int) -> WinChoice | None:
    """The level-complete button under the point, if any."""
    if not 210 <= x <= 390:
        return None
    if 180 <= y <= 220:
        return WinChoice.NEXT
    if 232 <= y <= 272:
        return WinChoice.MENU
    return None


class Game:
    """The state of a play session and the loop that drives it."""

    def __init__(self, renderer: Renderer, map_dir: str | Path = "Map"):
        self.renderer = renderer
        self.map_dir = Path(map_dir)
        self.progress = LevelProgress()
        self.board: Board | None = None
        self.level = 0
        self.undo_times = UNDO_TIMES
        self.music_paused = False
        self.option_open = False
        self.stage = _Stage.START
        self._initial_rows: list[str] = []

    def play(self, level: int) -> Board:
        """Load a level from its map file and start playing it."""
        board = load_map_file(level, self.map_dir)
        self.level = level
        self._initial_rows = board.rows()
        self._begin(board)
        return board

    def _restart(self) -> None:
        self._begin(Board(self._initial_rows))

    def _begin(self, board: Board) -> None:
        self.board = board
        self.undo_times = UNDO_TIMES
        self.option_open = False
        self.stage = _Stage.PLAY

    def handle_click(self, x: int, y: int) -> bool:
        """Apply a left click on the play screen; return whether it changed anything."""
        if self.board is None:
            raise RuntimeError("no level is being played")
        changed = False
        if hit_undo(x, y) and self.undo_times > 0 and self.board.undo():
            self.undo_times -= 1
            changed = True
        if hit_music(x, y):
            if pygame.mixer.get_init():
                if self.music_paused:
                    pygame.mixer.music.unpause()
                else:
                    pygame.mixer.music.pause()
            self.music_paused = not self.music_paused
            changed = True
        if hit_menu(x, y):
            self.option_open = not self.option_open
            changed = True
        return changed

    # Drawing helpers

    def _draw_image(self, name: str, rect: tuple[int, int, int, int] | None = None) -> None:
        texture = self.renderer.load_texture(name)
        if texture is None:
            return
        screen = self.renderer.screen
        if rect is None:
            rect = (0, 0, *screen.get_size())
        x, y, w, h = rect
        screen.blit(pygame.transform.scale(texture, (w, h)), (x, y))

    def _present(self) -> None:
        display = pygame.display.get_surface()
        if display is not None and display is self.renderer.screen:
            pygame.display.flip()

    def _draw_start(self, hover: bool) -> None:
        self._draw_image("main_background.png")
        name = "start_button_hover.png" if hover else "start_button.png"
        self._draw_image(name, START_BUTTON_RECT)
        self._present()

    def _open_menu(self) -> None:
        self.stage = _Stage.MENU
        self.option_open = False
        self._draw_image("level_section.png")
        self.renderer.draw_text("LEVEL", LEVEL_TITLE_RECT)
        for number in range(1, self.progress.count + 1):
            x, y, w, h = level_rect(number)
            self._draw_image("level_background.png", (x, y, w, h))
            self.renderer.draw_text(str(number), (x + 5, y + 5, w - 10, h - 10))
            if not self.progress.is_unlocked(number):
                self._draw_image("lock.png", (x + 10, y + 10, w - 20, h - 20))
        self._present()

    def _redraw_board(self) -> None:
        assert self.board is not None
        solved = self.renderer.draw_board(self.board, self.music_paused, self.option_open)
        if solved:
            self._complete_level()
        elif self.option_open:
            self.stage = _Stage.OPTION

    def _complete_level(self) -> None:
        self.level += 1
        if self.level <= self.progress.count:
            self.progress.unlock(self.level)
        self.stage = _Stage.WIN
        self.renderer.draw_win()

    # Event handlers, one per stage

    def _on_start(self, event: pygame.event.Event) -> None:
        x0, y0, w, h = START_BUTTON_RECT
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
            x, y = event.pos
            if _inside(x, y, x0, y0, x0 + w, y0 + h):
                self._open_menu()
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self._draw_start(_inside(x, y, x0, y0, x0 + w, y0 + h))

    def _on_menu(self, event: pygame.event.Event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN:
            return
        number = level_at(self.progress, *event.pos)
        if number is not None:
            self.play(number)
            self._redraw_board()

    def _on_play(self, event: pygame.event.Event) -> None:
        assert self.board is not None
        if event.type == pygame.KEYDOWN:
            direction = _KEYS.get(event.key)
            if direction is not None:
                self.board.move(direction)
            self._redraw_board()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT:
                self.handle_click(*event.pos)
            self._redraw_board()

    def _on_option(self, event: pygame.event.Event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != pygame.BUTTON_LEFT:
            return
        choice = option_choice(*event.pos)
        if choice is OptionChoice.RESUME:
            self.option_open = False
            self.stage = _Stage.PLAY
            self._redraw_board()
        elif choice is OptionChoice.RESTART:
            self._restart()
            self._redraw_board()
        elif choice is OptionChoice.MENU:
            self._open_menu()

    def _on_win(self, event: pygame.event.Event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN:
            return
        choice = win_choice(*event.pos)
        if choice is WinChoice.NEXT and self.level <= self.progress.count:
            self.play(self.level)
            self._redraw_board()
        elif choice is WinChoice.MENU:
            self._open_menu()

    def run(self) -> None:
        """Show the start screen and process events until the window is closed."""
        handlers = {
            _Stage.START: self._on_start,
            _Stage.MENU: self._on_menu,
            _Stage.PLAY: self._on_play,
            _Stage.OPTION: self._on_option,
            _Stage.WIN: self._on_win,
        }
        self.stage = _Stage.START
        self._draw_start(hover=False)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            handlers[self.stage](event)


def _start_music(path: str | Path) -> None:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init(44100, -16, 2, 2048)
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except pygame.error as exc:
        print(f"Unable to play music {path}: {exc}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Push every box onto a coin.")
    parser.add_argument("--map-dir", default="Map", help="directory holding map<N>.txt files")
    parser.add_argument("--image-dir", default="Image", help="directory holding the images")
    parser.add_argument("--font", default="Font/Roboto-Bold.ttf", help="font used for text")
    parser.add_argument("--music", default=MUSIC_FILE, help="background music file")
    args = parser.parse_args(argv)

    try:
        screen = create_window()
    except RuntimeError as exc:
        print(exc)
        return 1
    try:
        _start_music(args.music)
        renderer = Renderer(screen, args.image_dir, args.font)
        Game(renderer, args.map_dir).run()
    finally:
        pygame.quit()
    return 0


__all__ = [
    "OptionChoice",
    "WinChoice",
    "Game",
    "hit_undo",
    "hit_music",
    "hit_menu",
    "option_choice",
    "win_choice",
    "main",
    "PIXEL",
]