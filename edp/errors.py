# edp/errors.py
class TransportError(RuntimeError):
    """The price service could not be reached or answered with a non-2xx status."""


class DecodeError(ValueError):
    """The price service answered, but the body is not the expected JSON document."""
