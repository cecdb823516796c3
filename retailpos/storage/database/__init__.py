from .db_connector import Database, build_database, get_db, normalize_url

__all__ = ["Database", "build_database", "get_db", "normalize_url"]
