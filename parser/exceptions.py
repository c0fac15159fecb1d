# parser/exceptions.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Custom exceptions for dependency graph parsing

"""Exceptions raised while parsing a textual dependency graph description."""


class ParseError(RuntimeError):
    """Exception raised when a graph description cannot be parsed.

    Covers syntax errors, illegal characters and declarations that would
    make a project transitively depend on itself.
    """

    pass
