class PokexError(Exception):
    pass


class ApiError(PokexError):
    """Raised when the exchange returns an error response, e.g. {"code": 30008, "message": "timestamp request expired"}"""
    def __init__(self, code: int | str | None, message: str, status_code: int | None=None, raw: dict | None=None):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.raw = raw
        super().__init__(f'[{code}] {message}' + (f' (HTTP {status_code})' if status_code else ''))


class RequestFailedError(PokexError):
    """Raised when a request fails for reasons other than an exchange error, e.g. network issues"""
    pass


class ResponseDecodeError(PokexError):
    """Raised when parsing raw result from REST API fails"""
    pass
