"""Drawing the board, the overlay boards and text with pygame."""

from __future__ import annotations

from pathlib import Path

import pygame

from .movement import BOXES_TO_SOLVE, Board, Piece

PIXEL = 25
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 400
WINDOW_TITLE = "Game project"

BACKGROUND = (255, 255, 255)
VOID_COLOR = (255, 116, 118)
TEXT_COLOR = (253, 242, 0)
FONT_SIZE = 30

UNDO_RECT = (550, 20, PIXEL, PIXEL)
MENU_RECT = (497, 15, PIXEL + 12, PIXEL + 12)
SPEAKER_RECT = (450, 15, PIXEL + 10, PIXEL + 10)
BOARD_RECT = (180, 110, 240, 180)

# Image drawn over the floor tile for each piece that stands on floor.
_OVERLAYS = {
    Piece.PLAYER: "player.bmp",
    Piece.BOX: "box.bmp",
    Piece.COIN: "coin.bmp",
    Piece.BOX_ON_COIN: "successbox.bmp",
}


def create_window(
    title: str = WINDOW_TITLE,
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
) -> pygame.Surface:
    """Start pygame and open the game window."""
    try:
        pygame.init()
        screen = pygame.display.set_mode((width, height))
    except pygame.error as exc:
        pygame.quit()
        raise RuntimeError(f"Create window Error: {exc}") from exc
    pygame.display.set_caption(title)
    return screen


class Renderer:
    """Draws game screens onto a pygame surface."""

    def __init__(
        self,
        screen: pygame.Surface,
        image_dir: str | Path = "Image",
        font_path: str | Path | None = "Font/Roboto-Bold.ttf",
    ):
        self.screen = screen
        self.image_dir = Path(image_dir)
        self.font_path = font_path
        self._textures: dict[str, pygame.Surface] = {}
        self._font: pygame.font.Font | None = None

    def load_texture(self, name: str) -> pygame.Surface | None:
        """Load an image from the image directory, or return None if it cannot be read."""
        cached = self._textures.get(name)
        if cached is not None:
            return cached
        path = self.image_dir / name
        try:
            texture = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError, OSError) as exc:
            print(f"Unable to load image {path} SDL_Image Error {exc}")
            return None
        self._textures[name] = texture
        return texture

    def _blit(self, name: str, rect: tuple[int, int, int, int] | None = None) -> None:
        texture = self.load_texture(name)
        if texture is None:
            return
        if rect is None:
            rect = (0, 0, *self.screen.get_size())
        x, y, w, h = rect
        self.screen.blit(pygame.transform.scale(texture, (w, h)), (x, y))

    def _present(self) -> None:
        display = pygame.display.get_surface()
        if display is not None and display is self.screen:
            pygame.display.flip()

    def draw_board(self, board: Board, music_paused: bool, option_open: bool) -> bool:
        """Draw the map and its buttons; return True if the board counts as solved."""
        self.screen.fill(BACKGROUND)
        placed = 0
        for y in range(board.height):
            for x in range(board.width):
                piece = board.cell(x, y)
                rect = (x * PIXEL, y * PIXEL, PIXEL, PIXEL)
                if piece is Piece.WALL:
                    self._blit("wall.png", rect)
                elif piece is Piece.VOID:
                    self.screen.fill(VOID_COLOR, rect)
                else:
                    self._blit("floor.png", rect)
                    overlay = _OVERLAYS.get(piece)
                    if overlay is not None:
                        self._blit(overlay, rect)
                    if piece is Piece.BOX_ON_COIN:
                        placed += 1

        self._blit("undoButton.png", UNDO_RECT)
        self._blit("menu.png", MENU_RECT)
        self._blit("muteButton.png" if music_paused else "speaker.png", SPEAKER_RECT)
        self._present()

        if option_open:
            self.draw_option()
        return placed == BOXES_TO_SOLVE

    def draw_option(self) -> None:
        """Dim the screen and show the pause board."""
        self._blit("option_background.png")
        self._blit("option.png", BOARD_RECT)
        self._present()

    def draw_win(self) -> None:
        """Dim the screen and show the level-complete board."""
        self._blit("option_background.png")
        self._blit("youWin.png", BOARD_RECT)
        self._present()

    def _get_font(self) -> pygame.font.Font | None:
        if self._font is not None:
            return self._font
        if not pygame.font.get_init():
            pygame.font.init()
        path = None if self.font_path is None else str(self.font_path)
        try:
            self._font = pygame.font.Font(path, FONT_SIZE)
        except (pygame.error, FileNotFoundError, OSError) as exc:
            print(f"Unable to open font {path}: {exc}")
            return None
        return self._font

    def draw_text(
        self, text: str, rect: tuple[int, int, int, int]
    ) -> pygame.Rect | None:
        """Draw text stretched to fill rect; return the area drawn, or None if no font."""
        font = self._get_font()
        if font is None:
            return None
        surface = font.render(text, False, TEXT_COLOR)
        x, y, w, h = rect
        return self.screen.blit(pygame.transform.scale(surface, (w, h)), (x, y))