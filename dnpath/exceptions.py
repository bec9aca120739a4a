class DNPathError(Exception):
    """Base class for all exceptions raised by dnpath"""
    pass


class FormatError(DNPathError):
    """Raised when an input string does not have the shape an operation requires

    :ivar value: The offending input
    :ivar expected: Human-readable description of the accepted shape
    """
    def __init__(self, value, expected):
        self.value = value
        self.expected = expected
        DNPathError.__init__(self, "'{0}' {1}".format(value, expected))


class DNPathWarning(Warning):
    """Generic dnpath warning category"""
    pass


class FormatWarning(DNPathWarning):
    """Issued in place of a FormatError when batch failures are reported rather than raised"""
    pass
