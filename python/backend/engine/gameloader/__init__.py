from backend.engine.gameloader.loader import load_board, parse_board, parse_rows, validate_board

__all__ = ["load_board", "parse_board", "parse_rows", "validate_board"]
