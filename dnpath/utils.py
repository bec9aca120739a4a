import re


def re_anchor(r):
    # \Z rather than $, which would also accept a trailing newline
    return r'^' + r + r'\Z'


def compile_anchored(r, flags=0):
    """Compile a grammar fragment so that it must match the entire string"""
    return re.compile(re_anchor(r), flags)
