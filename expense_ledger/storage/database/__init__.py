from .db_connector import Database, build_connect_args

__all__ = ["Database", "build_connect_args"]
