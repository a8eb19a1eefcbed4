
class BebopError(Exception):
    """ Base class for all Bebop errors"""
    pass

class BebopSyntaxError(BebopError):
    """ Raised when source text cannot be read (brackets, strings, numbers)"""

class BebopUnboundSymbol(BebopError):
    """ Raised when a symbol is used before it is bound"""

class BebopTypeError(BebopError):
    """ Raised when the types of arguments passed to a function or form are incorrect"""

class BebopArityError(BebopError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class BebopEmptyList(BebopError):
    """ Raised when head/tail is applied to an empty list"""

class BebopDivisionByZero(BebopError):
    """ Raised when the right operand of / or % is zero"""

class BebopInterrupt(BebopError):
    """ Raised by the die builtin with a user supplied message"""

class BebopRecursionError(BebopError):
    """ Raised when evaluation exhausts the native call stack"""
