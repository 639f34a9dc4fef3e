"""Exception types shared across the treblecross package."""


class TreblecrossError(Exception):
    pass


class DuplicateMoveError(TreblecrossError, ValueError):
    """A cell index was recorded twice in one move log."""


class SaveError(TreblecrossError):
    pass


class SaveFormatError(SaveError, ValueError):
    """Save file content does not describe a game for this board."""


class SaveIOError(SaveError, OSError):
    """Save file could not be read or written."""
