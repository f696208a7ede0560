#!/usr/bin/python
# -*- coding: utf-8 -*-

from ezrange import log

###############################################################################

class RangeEnvironment(object):
    _instance = None

    @staticmethod
    def Get():
        if RangeEnvironment._instance is None:
            RangeEnvironment._instance = RangeEnvironment()
        return RangeEnvironment._instance

    # -------------------------------------------------------------------- #

    @staticmethod
    def Reset():
        ''' Drop the current settings; the next Get() starts from defaults. '''
        RangeEnvironment._instance = None
        log.setLogLevel(log.LOG_LEVEL_INFO)

    # -------------------------------------------------------------------- #

    def __init__(self):
        self._closed_form_size = True

    # -------------------------------------------------------------------- #

    def setClosedFormSize(self, val):
        self._closed_form_size = bool(val)

    # -------------------------------------------------------------------- #

    def closedFormSize(self):
        return self._closed_form_size

    # -------------------------------------------------------------------- #

    def setLogLevel(self, val):
        log.setLogLevel(val)

    # -------------------------------------------------------------------- #

    def logLevel(self):
        return log.logLevel()
