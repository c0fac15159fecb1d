# parser/grammar.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# LALR(1) grammar and parser for dependency graph descriptions using SLY

"""Dependency graph grammar implemented with the SLY parser generator.

Grammar:
    graph      : statements
    statements : statements statement | statement
    statement  : chain SEMI
    chain      : chain ARROW group | group
    group      : group COMMA NAME | NAME
"""

from typing import List

from sly import Parser
from .lexer import GraphLexer
from .ast_nodes import DependencyChain
from .exceptions import ParseError
from utils.logger import get_logger


class _GraphParser(Parser):
    """SLY-based LALR(1) parser producing a list of DependencyChain statements."""

    tokens = GraphLexer.tokens

    @_("statements")
    def graph(self, p) -> List[DependencyChain]:
        return p.statements

    @_("statements statement")
    def statements(self, p) -> List[DependencyChain]:
        return p.statements + [p.statement]

    @_("statement")
    def statements(self, p) -> List[DependencyChain]:
        return [p.statement]

    @_("chain SEMI")
    def statement(self, p) -> DependencyChain:
        return DependencyChain(tuple(p.chain))

    @_("chain ARROW group")
    def chain(self, p) -> list:
        return p.chain + [p.group]

    @_("group")
    def chain(self, p) -> list:
        return [p.group]

    @_("group COMMA NAME")
    def group(self, p) -> tuple:
        return p.group + (p.NAME,)

    @_("NAME")
    def group(self, p) -> tuple:
        return (p.NAME,)

    def parse(self, text: str) -> List[DependencyChain]:
        """Parse a graph description into its statements.

        Raises:
            ParseError: If the description is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing graph description ({len(text)} chars)")

        try:
            tokens = list(GraphLexer().tokenize(text))
            if not tokens:
                raise ParseError("Graph description is empty.")
            result = super().parse(iter(tokens))
        except ParseError:
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}")

        if result is None:
            raise ParseError("Failed to parse graph description (syntax error).")

        logger.debug(f"Parsed {len(result)} statements")
        return result

    def error(self, token):
        """Handle syntax errors during parsing.

        Raises:
            ParseError: Always raises with the offending token and its position
        """
        if token:
            raise ParseError(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        raise ParseError("Syntax error: unexpected end of graph description (missing ';'?)")
