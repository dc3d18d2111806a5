from backend.engine.gamestate.state import RunTimer

__all__ = ["RunTimer"]
