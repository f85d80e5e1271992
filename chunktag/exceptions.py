class ChunkTypeException(Exception):
    '''Base class to extend in order to throw exception in chunktag.

    It takes the value that caused the exception and an optional message.
    '''

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f'{value!r} is not a valid chunk type')


class InvalidReservedByte(ChunkTypeException):
    pass


class NonLetterByte(ChunkTypeException):
    pass


class MalformedBytes(ChunkTypeException, ValueError):
    pass


class MalformedText(ChunkTypeException, ValueError):
    pass


class UnrecoverableException(ChunkTypeException):
    '''This is raised when an invariant of an already built chunk type
    doesn't hold anymore: it's a bug, not a bad input.'''
    pass


class NonTextualBytes(UnrecoverableException):
    pass
