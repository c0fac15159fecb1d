# parser/lexer.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Lexical analyzer for dependency graph descriptions using SLY

"""Lexical analyzer for dependency graph descriptions.

Supported Tokens:
- Project names: letters, digits, underscores and dots
- Operators: ``->`` (dependency), ``,`` (grouping), ``;`` (end of statement)
- Comments: ``#`` to end of line, ignored
- Whitespace: ignored, newlines counted for error positions
"""

from sly import Lexer
from utils.logger import get_logger


class GraphLexer(Lexer):
    """SLY-based lexer for dependency graph descriptions."""

    tokens = {"NAME", "ARROW", "COMMA", "SEMI"}

    ignore = " \t\r"
    ignore_comment = r"\#.*"

    ARROW = r"->"
    COMMA = r","
    SEMI = r";"

    # Project names may start with a digit ("1", "2" are valid projects)
    NAME = r"[A-Za-z0-9_][A-Za-z0-9_.]*"

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += t.value.count("\n")

    def error(self, t):
        """Handle illegal characters during tokenization.

        Raises:
            ValueError: Always raised with character and line information
        """
        illegal_char = t.value[0]
        get_logger().debug(f"Illegal character '{illegal_char}' at position {self.index}")
        self.index += 1
        raise ValueError(
            f"Illegal character '{illegal_char}' at line {self.lineno}, position {t.index}"
        )
