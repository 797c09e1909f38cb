class NetworkStatusError(Exception):
    """Base class for errors raised by the network status service"""


class LocalAddressNotFound(NetworkStatusError):
    """No non-loopback IPv4 address is configured on this host"""

    def __init__(self, message='no local IP found'):
        super().__init__(message)


class InvalidRequest(NetworkStatusError):
    """A client request that must be fixed by the caller (400/405)"""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
