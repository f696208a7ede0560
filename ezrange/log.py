#!/usr/bin/python
# -*- coding: utf-8 -*-

import sys
import time

# -------------------------------------------------------------------- #

LOG_LEVEL_FATAL = 0
LOG_LEVEL_ERROR = 1
LOG_LEVEL_INFO = 3
LOG_LEVEL_DEBUG = 10
LOG_LEVEL_ALL = sys.maxsize

# -------------------------------------------------------------------- #

def _streamWrite(stream, data):
    stream.write(data + "\n")
    stream.flush()

# -------------------------------------------------------------------- #

def _logWrite(data):
    _streamWrite(sys.stdout, data)

# -------------------------------------------------------------------- #

def _errorWrite(data):
    _streamWrite(sys.stderr, data)

# -------------------------------------------------------------------- #

g_log_level = LOG_LEVEL_INFO
g_log_op = _logWrite
g_error_op = _errorWrite

# -------------------------------------------------------------------- #

def setLogLevel(log_level):
    global g_log_level
    g_log_level = log_level

# -------------------------------------------------------------------- #

def logLevel():
    return g_log_level

# -------------------------------------------------------------------- #

def setLogOps(log_op = None, error_op = None):
    '''
    Replace the functions that receive formatted lines. Passing None keeps
    the current one; resetLogOps() restores stdout/stderr.
    '''
    global g_log_op
    global g_error_op

    if log_op is not None:
        g_log_op = log_op
    if error_op is not None:
        g_error_op = error_op

# -------------------------------------------------------------------- #

def resetLogOps():
    global g_log_op
    global g_error_op
    g_log_op = _logWrite
    g_error_op = _errorWrite

# -------------------------------------------------------------------- #

def _doLog(msg, level, op):
    if level > g_log_level:
        return
    msg = "[%s] %s" % (time.strftime("%Y-%m-%d %H:%M:%S"), msg)
    if op is not None:
        op(msg)

# -------------------------------------------------------------------- #

def log(msg):
    _doLog(msg, LOG_LEVEL_INFO, g_log_op)

# -------------------------------------------------------------------- #

def debug(msg):
    _doLog(msg, LOG_LEVEL_DEBUG, g_log_op)

# -------------------------------------------------------------------- #

def error(msg):
    _doLog(msg, LOG_LEVEL_ERROR, g_error_op)
