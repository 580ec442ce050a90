class CurlbridgeException(Exception):
    """Generic exception."""


class UnsupportedTargetError(CurlbridgeException):
    """No snippet generator is registered for the requested target."""

    def __init__(self, target: str, *args: object):
        """Construct the error.

        Args:
            target: The target identifier that was requested.
        """
        self.target = target

        super().__init__(f"No snippet generator for target '{target}'.", *args)
