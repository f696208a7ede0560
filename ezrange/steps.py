#!/usr/bin/python
# -*- coding: utf-8 -*-

'''
Element kinds and step sequences.

A kind is the numpy dtype of a range element. Only the kinds listed in
DEFAULT_STEPS have a default step: integers advance by one, floats by one
tenth. Float steps are added in decimal on the shortest representation of
the value, so a one-digit grid (1.0, 1.1, 1.2, ...) never drifts.
'''

from decimal import Decimal

import numpy as np

from ezrange import log
from ezrange.exceptions import InvalidArgument, UnsupportedType, logged

#############################################################################

FLOAT_STEP = Decimal("0.1")

DEFAULT_STEPS = { np.dtype(np.int8):    1,
                  np.dtype(np.int16):   1,
                  np.dtype(np.int32):   1,
                  np.dtype(np.int64):   1,
                  np.dtype(np.float32): FLOAT_STEP,
                  np.dtype(np.float64): FLOAT_STEP }

#############################################################################

class _DefaultStep(object):
    def __repr__(self):
        return "DEFAULT_STEP"

# Marks "no step given" so that an explicit step=None can still be refused.
DEFAULT_STEP = _DefaultStep()

#############################################################################

class KindStep(object):
    '''
    Default step of a kind. Callable like any other step, and also able to
    count a sequence without walking it.
    '''

    def __init__(self, kind, delta):
        self.kind = kind
        self.delta = delta

    # -------------------------------------------------------------------- #

    def isInteger(self):
        return self.kind.kind == "i"

    # -------------------------------------------------------------------- #

    def __call__(self, value):
        if self.isInteger():
            return type(value)(int(value) + self.delta)
        return type(value)(float(Decimal(str(value)) + self.delta))

    # -------------------------------------------------------------------- #

    def size(self, start, end):
        ''' Number of elements from start to end, or None if it has to be counted. '''
        if self.isInteger():
            return int(end) - int(start) + 1

        low = Decimal(str(start))
        high = Decimal(str(end))
        if not (_onGrid(low) and _onGrid(high)):
            return None
        # Past this magnitude grid decimals no longer survive a round trip through str.
        if max(abs(low), abs(high)) >= 10 ** (np.finfo(self.kind).precision - 1):
            return None
        return int((high - low) / self.delta) + 1

    # -------------------------------------------------------------------- #

    def advances(self, start, end):
        ''' False when float spacing between start and end is too coarse for the step. '''
        if self.isInteger():
            return True
        magnitude = max(abs(float(start)), abs(float(end)))
        return bool(np.spacing(self.kind.type(magnitude)) < float(self.delta))

    # -------------------------------------------------------------------- #

    def __repr__(self):
        return "+%s (%s)" % (self.delta, self.kind)

# -------------------------------------------------------------------- #

def _onGrid(value):
    return value.is_finite() and value.as_tuple().exponent >= -1

# -------------------------------------------------------------------- #

def _convert(cls, value):
    ''' value as cls, refused unless the conversion keeps its numeric value. '''
    if isinstance(value, (str, bytes)):
        raise logged(InvalidArgument, "Bound %r is not a number" % (value,))
    try:
        converted = cls(value)
    except (TypeError, ValueError, OverflowError) as ex:
        raise logged(InvalidArgument, "Cannot convert %r to %s: %s" % (value, cls.__name__, ex))
    if not _sameValue(converted, value):
        raise logged(InvalidArgument, "Converting %r to %s would change it to %s" % (value, cls.__name__, converted))
    return converted

# -------------------------------------------------------------------- #

def _sameValue(converted, value):
    if converted == value:
        return True
    # A float kind narrower than value keeps it if the shortest decimal form is unchanged.
    if isinstance(converted, (float, np.floating)):
        return Decimal(str(converted)) == Decimal(str(value))
    return False

#############################################################################

def toKind(kind):
    try:
        return np.dtype(kind)
    except TypeError:
        raise logged(UnsupportedType, "Unknown element kind: %r" % (kind,))

# -------------------------------------------------------------------- #

def kindOf(value):
    if value is None:
        raise logged(InvalidArgument, "Element cannot be None")
    try:
        array = np.asarray(value)
    except (TypeError, ValueError, OverflowError):
        raise logged(UnsupportedType, "Unsupported data type: %s" % type(value).__name__)
    if array.ndim != 0:
        raise logged(UnsupportedType, "Not a scalar element: %r" % (value,))
    return array.dtype

# -------------------------------------------------------------------- #

def defaultStep(kind):
    kind = toKind(kind)
    if kind not in DEFAULT_STEPS:
        raise logged(UnsupportedType, "No default step for kind '%s'" % kind)
    return KindStep(kind, DEFAULT_STEPS[kind])

#############################################################################

def resolveSequence(start, end, step = DEFAULT_STEP, kind = None):
    '''
    Validate a start/end/step triple.

    Returns (start, end, step, empty). With the default step the step is
    taken from kind, or from the kind of start when kind is None; an
    explicit kind converts both bounds to it, otherwise end is converted to
    the type of start. Conversions that change a value are refused, and so
    are float bounds too large for the 0.1 step to advance.
    '''
    if start is None:
        raise logged(InvalidArgument, "Start element cannot be None")
    if end is None:
        raise logged(InvalidArgument, "End element cannot be None")

    if step is DEFAULT_STEP:
        if kind is None:
            step = defaultStep(kindOf(start))
            if type(end) is not type(start):
                end = _convert(type(start), end)
        else:
            step = defaultStep(kind)
            start = _convert(step.kind.type, start)
            end = _convert(step.kind.type, end)
    elif kind is not None:
        raise logged(InvalidArgument, "An element kind only applies to the default step")
    elif step is None:
        raise logged(InvalidArgument, "Increment function cannot be None")
    elif not callable(step):
        raise logged(InvalidArgument, "Increment function is not callable: %r" % (step,))

    try:
        reverse = bool(start > end)
        empty = bool(start == end)
    except (TypeError, ValueError):
        raise logged(InvalidArgument, "Start element %r cannot be compared with end element %r" % (start, end))
    if reverse:
        raise logged(InvalidArgument, "Start element cannot be greater than end element (%s > %s)" % (start, end))
    if not empty and isinstance(step, KindStep) and not step.advances(start, end):
        raise logged(InvalidArgument, "Default step %s cannot advance past floats as large as %s..%s" % (step.delta, start, end))

    return start, end, step, empty

# -------------------------------------------------------------------- #

def stepSequence(start, end, step):
    '''
    Yield start, step(start), ... up to end inclusive. The element equal to
    end is never stepped past.
    '''
    current = start
    while True:
        yield current
        if not current < end:
            return
        current = step(current)
        if current > end:
            return

# -------------------------------------------------------------------- #

def countSequence(start, end, step):
    count = 0
    for _ in stepSequence(start, end, step):
        count += 1
    log.debug("Counted %u elements from %s to %s" % (count, start, end))
    return count
