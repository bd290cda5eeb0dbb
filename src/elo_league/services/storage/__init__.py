from elo_league.services.storage.codec import decode, dumps, encode, loads
from elo_league.services.storage.file_store import load_league, save_league

__all__ = ["decode", "dumps", "encode", "load_league", "loads", "save_league"]
