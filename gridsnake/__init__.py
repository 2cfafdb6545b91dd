"""Grid-based snake game: rules engine, session timing and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["game", "session", "app"]