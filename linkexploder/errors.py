"""Exception types raised by linkexploder."""


class LinkExploderError(Exception):
    pass


class NoAvailablePathError(LinkExploderError):
    """Every candidate output path within the attempt bound is taken."""

    def __init__(self, path: str, attempts: int):
        super().__init__(f"no available path for {path} after {attempts} attempts")
        self.path = path
        self.attempts = attempts


class LayoutError(LinkExploderError):
    """Internal layout invariant was broken."""


class NoteNotFoundError(LinkExploderError):
    pass


class SettingsError(LinkExploderError):
    pass
