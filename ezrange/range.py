#!/usr/bin/python
# -*- coding: utf-8 -*-

from collections.abc import MutableSet, Set
from itertools import islice
from random import randint

from sortedcontainers import SortedSet

from ezrange import log
from ezrange.environment import RangeEnvironment
from ezrange.exceptions import EmptyRange, InvalidArgument, UnsupportedOperation, logged
from ezrange.steps import DEFAULT_STEP, KindStep, countSequence, resolveSequence, stepSequence

#############################################################################
# Range interface:
#############################################################################

class EZIRange(Set):
    '''
    Set of ordered values between two bounds. Subclasses decide how values
    are stored and what membership means; None is never a member and asking
    for it is an error.
    '''

    def size(self):
        return len(self)

    #--------------------------------------------------------------------#

    def isEmpty(self):
        return len(self) == 0

    #--------------------------------------------------------------------#

    def __contains__(self, value):
        return self.contains(value)

    #--------------------------------------------------------------------#

    def contains(self, value):
        if value is None:
            raise logged(InvalidArgument, "Element cannot be None")
        return self._contains(value)

    #--------------------------------------------------------------------#

    def containsAll(self, values):
        for value in values:
            if not self.contains(value):
                return False
        return True

    #--------------------------------------------------------------------#

    def _contains(self, value):
        raise NotImplementedError()

    #--------------------------------------------------------------------#

    def rand(self):
        raise NotImplementedError()

#############################################################################
# EZRange
#############################################################################

class EZRange(EZIRange):
    '''
    Read-only range that keeps only start, end and step.

    Size and iteration are derived from the bounds on demand. Membership
    uses interval semantics: any value between start and end is contained,
    even one that stepping from start never produces. A range whose start
    equals its end is empty.
    '''

    def __init__(self, start, end, step = DEFAULT_STEP, kind = None):
        start, end, step, empty = resolveSequence(start, end, step, kind)
        if empty:
            self._start = None
            self._end = None
            self._step = None
            self._size = 0
        else:
            self._start = start
            self._end = end
            self._step = step
            self._size = None

    #--------------------------------------------------------------------#

    @classmethod
    def of(cls, start, end, step = DEFAULT_STEP, kind = None):
        return cls(start, end, step, kind)

    #--------------------------------------------------------------------#

    def start(self):
        return self._start

    #--------------------------------------------------------------------#

    def end(self):
        return self._end

    #--------------------------------------------------------------------#

    def isEmpty(self):
        return self._step is None

    #--------------------------------------------------------------------#

    def __len__(self):
        if self._size is None:
            self._size = self._calculateSize()
        return self._size

    #--------------------------------------------------------------------#

    def _calculateSize(self):
        if isinstance(self._step, KindStep) and RangeEnvironment.Get().closedFormSize():
            size = self._step.size(self._start, self._end)
            if size is not None:
                log.debug("%r: closed-form size %u" % (self, size))
                return size
        return countSequence(self._start, self._end, self._step)

    #--------------------------------------------------------------------#

    def __iter__(self):
        if self._step is None:
            return iter(())
        return stepSequence(self._start, self._end, self._step)

    #--------------------------------------------------------------------#

    def _contains(self, value):
        if self._step is None:
            return False
        try:
            return bool(self._start <= value <= self._end)
        except (TypeError, ValueError):
            # Not comparable with the bounds, so not between them.
            return False

    #--------------------------------------------------------------------#

    def rand(self):
        if self._step is None:
            raise logged(EmptyRange, "Cannot pick an element of an empty range")
        index = randint(0, len(self) - 1)
        if isinstance(self._step, KindStep) and self._step.isInteger():
            return type(self._start)(int(self._start) + index)
        return next(islice(iter(self), index, None))

    #--------------------------------------------------------------------#

    def __hash__(self):
        return self._hash()

    #--------------------------------------------------------------------#

    def __repr__(self):
        if self._step is None:
            return "<empty>"
        return "[%s..%s]" % (self._start, self._end)

    #--------------------------------------------------------------------#

    @classmethod
    def _from_iterable(cls, values):
        raise logged(UnsupportedOperation, "Set algebra is not supported on a read-only range")

    #--------------------------------------------------------------------#

    def _unsupported(self, operation):
        return logged(UnsupportedOperation, "%s operation is not supported on a read-only range" % operation)

    def add(self, value):
        raise self._unsupported("add")

    def remove(self, value):
        raise self._unsupported("remove")

    def discard(self, value):
        raise self._unsupported("discard")

    def addAll(self, values):
        raise self._unsupported("addAll")

    def removeAll(self, values):
        raise self._unsupported("removeAll")

    def retainAll(self, values):
        raise self._unsupported("retainAll")

    def clear(self):
        raise self._unsupported("clear")

    def toArray(self):
        raise self._unsupported("toArray")

#############################################################################
# EZMutableRange
#############################################################################

class EZMutableRange(EZIRange, MutableSet):
    '''
    Materialized range backed by a SortedSet.

    Every element is stored, so membership is an exact lookup: a value is
    contained only if it was added or produced by one of the added
    sequences. Not thread-safe; callers serialize mutations.
    '''

    def __init__(self, elements = None):
        self._elements = SortedSet()
        if elements is not None:
            self.addAll(elements)

    #--------------------------------------------------------------------#

    @classmethod
    def of(cls, start, end, step = DEFAULT_STEP, kind = None):
        result = cls()
        result.addRange(start, end, step, kind)
        return result

    #--------------------------------------------------------------------#

    def addRange(self, start, end, step = DEFAULT_STEP, kind = None):
        start, end, step, empty = resolveSequence(start, end, step, kind)
        if empty:
            return False
        self._checkComparable(start)
        before = len(self._elements)
        self._elements.update(stepSequence(start, end, step))
        log.debug("Added %u elements from %s to %s" % (len(self._elements) - before, start, end))
        return len(self._elements) != before

    #--------------------------------------------------------------------#

    def _checkElement(self, value):
        if value is None:
            raise logged(InvalidArgument, "Element cannot be None")
        try:
            hash(value)
        except TypeError:
            raise logged(InvalidArgument, "Element %r is not hashable" % (value,))

    #--------------------------------------------------------------------#

    def _checkComparable(self, value):
        self._checkElement(value)
        if not self._elements:
            return
        try:
            value < self._elements[0]
        except TypeError:
            raise logged(InvalidArgument, "Element %r cannot be compared with %r" % (value, self._elements[0]))

    #--------------------------------------------------------------------#

    def __len__(self):
        return len(self._elements)

    #--------------------------------------------------------------------#

    def __iter__(self):
        return iter(self._elements)

    #--------------------------------------------------------------------#

    def _contains(self, value):
        try:
            return value in self._elements
        except TypeError:
            # Unhashable values are never stored.
            return False

    #--------------------------------------------------------------------#

    def add(self, value):
        self._checkComparable(value)
        if value in self._elements:
            return False
        self._elements.add(value)
        return True

    #--------------------------------------------------------------------#

    def discard(self, value):
        self._checkElement(value)
        self._elements.discard(value)

    #--------------------------------------------------------------------#

    def remove(self, value):
        self._checkElement(value)
        self._elements.remove(value)

    #--------------------------------------------------------------------#

    def addAll(self, values):
        before = len(self._elements)
        for value in values:
            self.add(value)
        return len(self._elements) != before

    #--------------------------------------------------------------------#

    def removeAll(self, values):
        values = list(values)
        for value in values:
            self._checkElement(value)
        before = len(self._elements)
        self._elements.difference_update(values)
        return len(self._elements) != before

    #--------------------------------------------------------------------#

    def retainAll(self, values):
        values = list(values)
        for value in values:
            self._checkElement(value)
        before = len(self._elements)
        self._elements.intersection_update(values)
        return len(self._elements) != before

    #--------------------------------------------------------------------#

    def clear(self):
        self._elements.clear()

    #--------------------------------------------------------------------#

    def toArray(self):
        return list(self._elements)

    #--------------------------------------------------------------------#

    def rand(self):
        if not self._elements:
            raise logged(EmptyRange, "Cannot pick an element of an empty range")
        return self._elements[randint(0, len(self._elements) - 1)]

    #--------------------------------------------------------------------#

    def __repr__(self):
        return "{%s}" % ", ".join([str(value) for value in self._elements])
