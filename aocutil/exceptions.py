class AocutilError(Exception):
    """base exception for this package"""


class RemoteStatusError(AocutilError):
    """adventofcode.com responded with something other than HTTP 200"""

    def __init__(self, message, status=None, url=None):
        super().__init__(message)
        self.status = status
        self.url = url


class ParseError(AocutilError, ValueError):
    """
    A line of the puzzle input could not be converted to the requested type.
    The values successfully parsed before the bad line are kept on the `partial`
    attribute, and the original conversion error is chained as `__cause__`.
    """

    def __init__(self, index, line, partial, error):
        super().__init__(f"at index {index}: {error}")
        self.index = index
        self.line = line
        self.partial = partial
        self.error = error
