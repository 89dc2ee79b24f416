from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List

from flask import Flask, jsonify, request

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ataxx import AIPlayer, Game, Move, PieceColor
from ataxx.config import CONFIG

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    logging.basicConfig(level=CONFIG.log_level)
    app = Flask(__name__)

    game = Game()
    # The AI plays whichever color the human did not pick.
    players = {"ai": PieceColor.BLUE}

    def _ai_turns(ai: AIPlayer) -> List[str]:
        """Let the AI move, passing for the human whenever they are stuck."""
        played: List[str] = []
        ai_color = players["ai"]
        while not game.is_game_over() and game.turn is ai_color:
            move = ai.choose_move(game.board, ai_color)
            game.play(move)
            played.append(str(move))
            if not game.is_game_over() and not game.board.can_move(game.turn):
                game.play(Move.pass_move())
        return played

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        try:
            color = PieceColor.from_name(data.get("color") or "red")
            to_move = PieceColor.from_name(data.get("to_move") or "red")
            depth = int(data["depth"]) if data.get("depth") is not None else None
            ai = AIPlayer(depth=depth)
            game.reset(data.get("layout"), to_move)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        players["ai"] = color.opposite()

        # If the human picked the side not on move, the AI moves first
        ai_moves = _ai_turns(ai)

        snap = game.snapshot()
        snap["ai_moves"] = ai_moves
        snap["ai_move"] = ai_moves[-1] if ai_moves else None
        return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        text = payload.get("move")
        if not text:
            return jsonify({"error": "Missing move"}), 400
        if game.turn is players["ai"]:
            return jsonify({"error": "Not your turn"}), 400

        try:
            depth = int(payload["depth"]) if payload.get("depth") is not None else None
            ai = AIPlayer(depth=depth)
            game.push(text)
        except ValueError as exc:
            logger.info("Rejected move %r: %s", text, exc)
            return jsonify({"error": str(exc)}), 400

        ai_moves = _ai_turns(ai)

        snap = game.snapshot()
        snap["ai_moves"] = ai_moves
        snap["ai_move"] = ai_moves[-1] if ai_moves else None
        return jsonify(snap)

    @app.get("/api/state")
    def api_state():
        snap = game.snapshot()
        snap["ai_color"] = str(players["ai"])
        return jsonify(snap)

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host=CONFIG.web.host, port=CONFIG.web.port, debug=CONFIG.web.debug)
