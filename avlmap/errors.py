class InvalidIteratorError(LookupError):
    """Raised when a cursor positioned past the end is dereferenced"""

    def __init__(self, message="cannot dereference the end iterator"):
        super().__init__(message)
