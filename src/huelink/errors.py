class HueError(Exception):
    """Base class for everything this library raises."""


class DiscoveryFailed(HueError):
    """Neither discovery strategy confirmed a bridge."""


class Unauthenticated(HueError):
    """A command that needs a username was sent without one."""


class TransportFailure(HueError):
    """The bridge could not be reached or answered with a non-success status."""


class MalformedResponse(HueError):
    """The bridge answered, but the body does not have the expected shape."""
