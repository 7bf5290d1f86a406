"""Exceptions raised by mstweight."""


class MSTError(Exception):
    """Base class for every error raised by this package."""


class NotFoundError(MSTError, KeyError):
    """A vertex label (or vertex) is not present in the graph."""

    def __str__(self) -> str:
        # NOTE: KeyError.__str__ would quote the message.
        return str(self.args[0]) if self.args else ""


class InvalidArgumentError(MSTError, ValueError):
    """An edge was registered with a missing endpoint or a bad weight."""


class DisconnectedGraphError(MSTError, ValueError):
    """No edge crosses from the visited set while vertices remain unreached."""


class GraphFormatError(MSTError, ValueError):
    """The textual graph description could not be parsed."""
