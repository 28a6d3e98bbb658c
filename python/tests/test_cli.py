"""Replay frontend and command-line entry point."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from typer.testing import CliRunner

import main
from backend.config import START_TILES
from backend.engine.gamegenerator import TileGenerator
from backend.engine.gameplay import GamePlay
from backend.models.board import Direction, Tile
from frontend.cli.rich import app as rich_app

runner = CliRunner()


# -- move parsing -------------------------------------------------------------


def test_parse_moves_skips_separators() -> None:
    assert rich_app.parse_moves("u, d l R") == [
        Direction.UP,
        Direction.DOWN,
        Direction.LEFT,
        Direction.RIGHT,
    ]


def test_parse_moves_warns_on_unknown(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert rich_app.parse_moves("uxq") == [Direction.UP]
    assert "Ignoring unknown move" in caplog.text


# -- replay -------------------------------------------------------------------


def test_run_without_moves_places_opening_tiles() -> None:
    game = rich_app.run(size=3, seed=3, plain=True)

    assert game.size == 3
    assert len(list(game.board.tiles())) == 2
    assert game.moves == 0


def test_run_is_reproducible() -> None:
    a = rich_app.run(size=4, moves="ulrdulrd", seed=11, plain=True)
    b = rich_app.run(size=4, moves="ulrdulrd", seed=11, plain=True)

    assert a == b


def test_run_stops_at_game_over() -> None:
    game = rich_app.run(size=2, moves="lrud" * 50, seed=0, max_piece=4, plain=True)

    assert game.game_over
    assert game.max_score == game.score
    assert game.moves < 200


def test_run_adds_no_tile_after_final_tilt(monkeypatch: pytest.MonkeyPatch) -> None:
    spawned_over: list[bool] = []
    original = TileGenerator.add_random_tile

    def recording_add(self: TileGenerator, game: GamePlay) -> Tile | None:
        spawned_over.append(game.game_over)
        return original(self, game)

    monkeypatch.setattr(TileGenerator, "add_random_tile", recording_add)
    monkeypatch.setattr(
        rich_app, "TileGenerator", lambda seed: TileGenerator(seed, four_probability=0.0)
    )

    game = rich_app.run(size=2, moves="lrud" * 50, seed=0, max_piece=4, plain=True)

    assert game.game_over
    assert not any(spawned_over)
    # one spawn per changed tilt, except the tilt that ended the game
    assert len(spawned_over) == START_TILES + game.moves - 1


def _recording_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    recorder = Console(record=True, width=100, file=io.StringIO())
    monkeypatch.setattr(rich_app, "console", recorder)
    return recorder


def test_run_renders_rich_panels(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _recording_console(monkeypatch)

    game = rich_app.run(size=4, moves="ud", seed=2)

    output = recorder.export_text()
    assert game.size == 4
    assert "Score:" in output
    assert "Moves:" in output
    assert "final" in output
    assert "GAME OVER" not in output
    assert "(game is" not in output


def test_run_renders_game_over_panel(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _recording_console(monkeypatch)

    game = rich_app.run(size=2, moves="lrud" * 50, seed=0, max_piece=4)

    output = recorder.export_text()
    assert game.game_over
    assert "Score:" in output
    assert "GAME OVER" in output


# -- command line -------------------------------------------------------------


def test_cli_plain_output() -> None:
    result = runner.invoke(main.app, ["-s", "2", "-m", "lrud", "--seed", "1", "--plain"])

    assert result.exit_code == 0, result.output
    assert "(game is" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["-s", "1"],
        ["-s", "9"],
        ["--max-piece", "12"],
    ],
)
def test_cli_rejects_bad_options(args: list[str]) -> None:
    result = runner.invoke(main.app, args)
    assert result.exit_code != 0
