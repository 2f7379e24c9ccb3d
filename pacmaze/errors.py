"""Exceptions raised while building a game session."""


class PacmazeError(Exception):
    """Base class for every error raised by pacmaze."""


class ConfigError(PacmazeError, ValueError):
    """A GameConfig value is out of range or inconsistent."""


class MazeError(ConfigError):
    """The maze layout cannot host a playable session."""
