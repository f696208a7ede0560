#!/usr/bin/python
# -*- coding: utf-8 -*-

from ezrange import log

#############################################################################

class RangeException(Exception):
    pass

#############################################################################

class InvalidArgument(RangeException, ValueError):
    pass

#############################################################################

class UnsupportedType(RangeException, TypeError):
    pass

#############################################################################

class UnsupportedOperation(RangeException, NotImplementedError):
    pass

#############################################################################

class EmptyRange(RangeException, LookupError):
    pass

#############################################################################

def logged(exception_class, msg):
    ''' Build an exception after writing its message to the debug log. '''
    log.debug("%s: %s" % (exception_class.__name__, msg))
    return exception_class(msg)
