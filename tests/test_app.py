import pygame
import pytest

from crateshift.app import (
    Game,
    OptionChoice,
    WinChoice,
    hit_menu,
    hit_music,
    hit_undo,
    option_choice,
    win_choice,
)
from crateshift.movement import Direction
from crateshift.render import Renderer, create_window


def _rows(cells=None):
    grid = [["#"] * 24]
    grid += [["#"] + ["_"] * 22 + ["#"] for _ in range(14)]
    grid += [["#"] * 24]
    grid[2][2] = "x"
    for (x, y), ch in (cells or {}).items():
        grid[y][x] = ch
    return ["".join(row) for row in grid]


def _write_map(directory, number, rows):
    (directory / f"map{number}.txt").write_text("\n".join(rows) + "\n", encoding="utf-8")


def _game(tmp_path):
    renderer = Renderer(pygame.Surface((600, 400)), tmp_path, None)
    return Game(renderer, tmp_path)


@pytest.mark.parametrize(
    "point, expected",
    [((550, 20), True), ((570, 40), True), ((571, 30), False), ((549, 30), False), ((560, 41), False)],
)
def test_hit_undo(point, expected):
    assert hit_undo(*point) is expected


@pytest.mark.parametrize(
    "point, expected",
    [((450, 15), True), ((480, 45), True), ((481, 20), False), ((460, 14), False)],
)
def test_hit_music(point, expected):
    assert hit_music(*point) is expected


@pytest.mark.parametrize(
    "point, expected",
    [((497, 15), True), ((534, 52), True), ((496, 20), False), ((520, 53), False)],
)
def test_hit_menu(point, expected):
    assert hit_menu(*point) is expected


@pytest.mark.parametrize(
    "point, expected",
    [
        ((300, 140), OptionChoice.RESUME),
        ((212, 122), OptionChoice.RESUME),
        ((300, 200), OptionChoice.RESTART),
        ((388, 277), OptionChoice.MENU),
        ((300, 170), None),
        ((211, 140), None),
    ],
)
def test_option_choice(point, expected):
    assert option_choice(*point) is expected


@pytest.mark.parametrize(
    "point, expected",
    [
        ((300, 200), WinChoice.NEXT),
        ((210, 180), WinChoice.NEXT),
        ((390, 272), WinChoice.MENU),
        ((300, 225), None),
        ((391, 200), None),
    ],
)
def test_win_choice(point, expected):
    assert win_choice(*point) is expected


def test_play_loads_level(tmp_path):
    rows = _rows({(3, 2): "o", (5, 2): "v"})
    _write_map(tmp_path, 1, rows)
    game = _game(tmp_path)
    board = game.play(1)
    assert board.rows() == rows
    assert game.board is board
    assert game.level == 1
    assert game.undo_times == 3


def test_play_missing_level_raises(tmp_path):
    game = _game(tmp_path)
    with pytest.raises(FileNotFoundError):
        game.play(7)


def test_handle_click_before_play_raises(tmp_path):
    game = _game(tmp_path)
    with pytest.raises(RuntimeError):
        game.handle_click(560, 30)


def test_undo_click_restores_previous_map(tmp_path):
    rows = _rows()
    _write_map(tmp_path, 1, rows)
    game = _game(tmp_path)
    game.play(1)
    assert game.board.move(Direction.RIGHT)
    assert game.handle_click(560, 30) is True
    assert game.board.rows() == rows
    assert game.board.player == (2, 2)
    assert game.undo_times == 2


def test_undo_without_history_does_nothing(tmp_path):
    _write_map(tmp_path, 1, _rows())
    game = _game(tmp_path)
    game.play(1)
    assert game.handle_click(560, 30) is False
    assert game.undo_times == 3


def test_undo_allowed_three_times_per_play(tmp_path):
    _write_map(tmp_path, 1, _rows())
    game = _game(tmp_path)
    game.play(1)
    snapshots = [game.board.rows()]
    for _ in range(5):
        assert game.board.move(Direction.RIGHT)
        snapshots.append(game.board.rows())
    for _ in range(3):
        assert game.handle_click(560, 30) is True
    assert game.handle_click(560, 30) is False
    assert game.undo_times == 0
    assert game.board.rows() == snapshots[2]


def test_music_click_toggles(tmp_path):
    _write_map(tmp_path, 1, _rows())
    game = _game(tmp_path)
    game.play(1)
    assert game.handle_click(460, 30) is True
    assert game.music_paused is True
    game.handle_click(460, 30)
    assert game.music_paused is False


def test_menu_click_toggles_option(tmp_path):
    _write_map(tmp_path, 1, _rows())
    game = _game(tmp_path)
    game.play(1)
    game.handle_click(510, 30)
    assert game.option_open is True
    game.handle_click(510, 30)
    assert game.option_open is False


def test_click_elsewhere_changes_nothing(tmp_path):
    rows = _rows()
    _write_map(tmp_path, 1, rows)
    game = _game(tmp_path)
    game.play(1)
    assert game.handle_click(100, 300) is False
    assert game.board.rows() == rows


def test_run_solving_level_unlocks_next(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    cells = {(3, 2): "o", (4, 2): "v"}
    for x in range(5, 10):
        cells[(x, 6)] = "s"
    _write_map(tmp_path, 1, _rows(cells))
    screen = create_window()
    try:
        game = Game(Renderer(screen, tmp_path, None), tmp_path)
        events = [
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(300, 300)),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(80, 110)),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT),
            pygame.event.Event(pygame.QUIT),
        ]
        pygame.event.clear()
        for event in events:
            pygame.event.post(event)
        game.run()
        assert game.board.is_solved()
        assert game.level == 2
        assert game.progress.is_unlocked(2)
    finally:
        pygame.quit()