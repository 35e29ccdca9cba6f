'''
Custom exception classes, for finer grained error handling
'''


class QueensBDDException(Exception):
    '''Parent class for all our exceptions'''
    pass


class ConfigurationError(QueensBDDException):
    '''Raised when a board size or variable count is not a positive integer'''
    pass

class UnknownVariableError(QueensBDDException):
    '''Raised when a variable outside of the manager's universe `[0, var_num)` is referenced'''
    pass

class InvalidCoordinateError(QueensBDDException):
    '''Raised when a board coordinate lies outside of `[0, size)`'''
    pass

class NotInitializedError(QueensBDDException):
    '''Raised when a game is used before `initialize_game()` was called'''
    pass
