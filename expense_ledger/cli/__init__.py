from .dispatcher import CommandDispatcher, HELP_TEXT

__all__ = ["CommandDispatcher", "HELP_TEXT"]
