"""FastAPI server for a local tic-tac-toe game."""
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from ..game.board import InvalidIndex
from ..game.config import AppConfig, load_config
from ..game.session import GameSession

logger = logging.getLogger(__name__)


class PlayRequest(BaseModel):
    """Request body for playing a cell."""
    cell: int = Field(ge=0, le=8)


class JumpRequest(BaseModel):
    """Request body for time travel."""
    move: int


def create_app(config: Optional[AppConfig] = None,
               session: Optional[GameSession] = None) -> FastAPI:
    config = config or AppConfig()
    app = FastAPI(title=config.title)

    # One game per app instance
    game = session or GameSession()

    def build_state_message(extra: dict = None) -> dict:
        msg = {"status": "ok", "state": game.to_dict()}
        if extra:
            msg.update(extra)
        return msg

    static_path = Path(__file__).parent / "static"
    if static_path.exists():
        app.mount("/static", StaticFiles(directory=str(static_path)), name="static")

    @app.get("/")
    async def get_index():
        """Serve the game page."""
        index_path = static_path / "index.html"
        if index_path.exists():
            return FileResponse(index_path)
        return HTMLResponse(f"<h1>{config.title}</h1><p>Client not found</p>")

    # ==================== Game ====================

    @app.get("/api/state")
    async def get_state():
        """Get what the page should currently show."""
        return build_state_message()

    @app.post("/api/new-game")
    async def new_game():
        """Throw away the history and start over."""
        game.new_game()
        return build_state_message()

    @app.post("/api/play")
    async def play(request: PlayRequest):
        """Play the next mark on a cell of the viewed board."""
        move = game.play_move(request.cell)
        return build_state_message({
            "played": move is not None,
            "move": move.to_dict() if move else None,
        })

    # ==================== History ====================

    @app.post("/api/jump")
    async def jump(request: JumpRequest):
        """Move the view to an earlier (or later) board."""
        try:
            game.jump_to(request.move)
        except InvalidIndex as e:
            logger.warning("Rejected jump: %s", e)
            return {"status": "error", "message": str(e)}
        return build_state_message()

    @app.get("/api/history")
    async def get_history():
        """Moves of the live branch, oldest first."""
        return {
            "status": "ok",
            "current_move": game.turn_number(),
            "moves": [m.to_dict() for m in game.history.moves],
        }

    return app


def main():
    import uvicorn

    config = load_config()
    logging.basicConfig(
        level=config.server.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving %s on %s:%d", config.title, config.server.host, config.server.port)
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level,
    )


if __name__ == "__main__":
    main()
