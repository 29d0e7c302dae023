class RtlError(Exception):
    """ Base class for all rtlisp errors"""
    pass

class RtlInvalidSymbol(RtlError):
    """ Raised when a non-symbol is used where a variable name is required"""
    pass

class RtlUnboundSymbol(RtlError):
    """ Raised when a symbol is looked up or assigned before it is bound"""
    pass

class RtlSyntaxError(RtlError):
    """ Raised when brackets are unbalanced or a sublist is unterminated"""

class RtlArityError(RtlError):
    """ Raised when the number of arguments passed to a function or special form is incorrect"""

class RtlTypeError(RtlError):
    """ Raised when a value cannot be applied, or a primitive gets the wrong types"""
