"""Exceptions raised across the layers. Everything derives from ReversiError so the terminal can catch the whole family."""


class ReversiError(Exception):
    """Base class for all errors of this application."""


class InvalidRequestError(ReversiError):
    """User text could not be turned into a request (wrong token count, row or column out of range, ...)."""


class IllegalMoveError(ReversiError):
    """The request was well formed, but the rules do not allow the move."""


class GameStateError(ReversiError):
    """A game snapshot could not be interpreted."""


class InvalidBoardError(ReversiError):
    """A board diagram could not be interpreted."""
