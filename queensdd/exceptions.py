'''
Custom exception classes, for finer grained error handling
'''


class QueensDDException(Exception):
    '''Parent class for all our exceptions'''
    pass


class ConfigurationError(QueensDDException):
    '''Raised when a board size or engine setting cannot be used (e.g. `size <= 0`)'''
    pass

class InvalidMoveError(QueensDDException):
    '''Raised when a queen is placed outside of the board'''
    pass

class EngineExhaustedError(QueensDDException):
    '''Raised when the formula engine holds more live nodes than its configured `max_nodes`'''
    pass

class NotInitializedError(QueensDDException):
    '''Raised when the board is used before `initialize()` was called'''
    pass

class NotSupportedError(QueensDDException):
    '''Raised when the formula engine package is not installed'''
    pass
