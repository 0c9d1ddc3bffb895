"""
Game Errors

Exceptions raised by the word source and secret selection.
"""


class WordleError(Exception):
    """Base class for errors that prevent a game from starting."""


class LoadError(WordleError):
    """The word source could not be read or holds too few usable words."""


class EmptyListError(WordleError):
    """A secret was requested from an empty word collection."""
