"""Base exception for the DNP3 point list generator."""


class DnpGenError(Exception):
    """Base class for fatal errors that stop a generation run."""
    pass
