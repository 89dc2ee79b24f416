from __future__ import annotations

import time

import pytest

from ataxx import AIPlayer, Game, PieceColor
from ataxx.config import Config
from web import create_app
from web.app import app as module_app


def test_game_legal_moves_and_push():
    g = Game()
    legal = g.get_legal_moves()
    assert len(legal) == 16
    assert "-" not in legal
    g.push("a7b6")
    assert g.get_turn_color() == "blue"
    assert g.snapshot()["last_move"] == "a7b6"
    with pytest.raises(ValueError):
        g.push("a7b6")
    with pytest.raises(ValueError):
        g.push("nonsense")


def test_game_result_reporting():
    g = Game(layout="r" + "-" * 48)
    assert g.is_game_over()
    assert g.get_result() == "red"
    g.reset(layout="b" + "-" * 48)
    assert g.get_result() == "blue"
    g.reset(layout="b" + "X" * 47 + "r")
    assert g.get_result() == "tie"


def test_game_records_parsed_moves():
    g = Game()
    assert g.get_result() is None
    g.push("a7-b6")
    g.push("g7f6")
    assert [str(m) for m in g.moves] == ["a7b6", "g7f6"]
    g.reset()
    assert g.moves == []


def test_engine_depths_respond_quickly():
    g = Game()
    g.push("a7b6")
    for depth in (1, 2, 3):
        start = time.time()
        move = AIPlayer(depth=depth).choose_move(g.board, PieceColor.BLUE)
        assert not move.is_pass()
        assert len(str(move)) == 4
        assert time.time() - start < 30.0


def test_api_new_and_move_returns_ai_reply():
    app = create_app()
    client = app.test_client()
    r = client.post("/api/new", json={"depth": 2})
    assert r.status_code == 200
    data = r.get_json()
    assert data["ai_move"] is None
    assert data["turn"] == "red"

    r = client.post("/api/move", json={"move": "a7b6", "depth": 2})
    assert r.status_code == 200
    data = r.get_json()
    assert "ai_move" in data and data["ai_move"]
    assert data["turn"] == "red"
    assert data["red_pieces"] >= 1


def test_api_ai_moves_first_when_human_is_blue():
    client = create_app().test_client()
    r = client.post("/api/new", json={"color": "blue", "depth": 1})
    assert r.status_code == 200
    data = r.get_json()
    assert data["ai_move"]
    assert data["turn"] == "blue"
    state = client.get("/api/state").get_json()
    assert state["ai_color"] == "red"


def test_api_rejects_bad_requests():
    client = create_app().test_client()
    client.post("/api/new", json={"depth": 1})
    assert client.post("/api/move", json={}).status_code == 400
    r = client.post("/api/move", json={"move": "a7a4"})
    assert r.status_code == 400
    assert "error" in r.get_json()
    assert client.post("/api/new", json={"color": "green"}).status_code == 400


def test_api_rejects_depth_beyond_search_limit():
    client = create_app().test_client()
    layout = "X" * 35 + "-bXXXXX" + "rXXXXXX"
    r = client.post("/api/new", json={"layout": layout, "color": "blue", "depth": 21})
    assert r.status_code == 400
    assert "depth" in r.get_json()["error"]
    client.post("/api/new", json={"depth": 1})
    assert client.post("/api/move", json={"move": "a7b6", "depth": 21}).status_code == 400
    assert client.get("/api/state").get_json()["last_move"] is None


def test_module_level_app_is_exposed():
    assert module_app.test_client().get("/api/state").status_code == 200


def test_config_from_toml(tmp_path):
    path = tmp_path / "ataxx.toml"
    path.write_text('log_level = "DEBUG"\n[search]\ndepth = 2\nunknown = 1\n[web]\nport = 8080\n')
    cfg = Config.load_from_toml(str(path))
    assert cfg.search.depth == 2
    assert cfg.web.port == 8080
    assert cfg.log_level == "DEBUG"
    assert not hasattr(cfg.search, "unknown")
    assert Config.load_from_toml(str(tmp_path / "missing.toml")).search.depth == 4
