"""Syntax tree nodes and their source-like string forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from merustmar.token import Token

_SENTENCE_END = "။"


class Node:
    """Base of every syntax tree node that carries a token."""

    token: Token

    def token_literal(self) -> str:
        """The literal text of the token this node was built from."""
        return self.token.literal


@dataclass
class Identifier(Node):
    """A name."""

    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral(Node):
    """An integer written in the source."""

    token: Token
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Boolean(Node):
    """A boolean keyword written in the source."""

    token: Token
    value: bool

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class PrefixExpression(Node):
    """An operator applied to the expression on its right."""

    token: Token
    operator: str
    right: Optional[Expression] = None

    def __str__(self) -> str:
        right = "" if self.right is None else str(self.right)
        return f"({self.operator}{right})"


@dataclass
class InfixExpression(Node):
    """A binary operator between two expressions."""

    token: Token
    left: Optional[Expression]
    operator: str
    right: Optional[Expression] = None

    def __str__(self) -> str:
        left = "" if self.left is None else str(self.left)
        right = "" if self.right is None else str(self.right)
        return f"({left} {self.operator} {right})"


@dataclass
class BlockStatement(Node):
    """A braced sequence of statements."""

    token: Token
    statements: list[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)


@dataclass
class IfExpression(Node):
    """A conditional with an optional alternative block."""

    token: Token
    condition: Optional[Expression]
    consequence: Optional[BlockStatement]
    alternative: Optional[BlockStatement] = None

    def __str__(self) -> str:
        parts = ["if"]
        if self.condition is not None:
            parts.append(f"({self.condition})")
        parts.append(" ")
        if self.consequence is not None:
            parts.append(str(self.consequence))
        if self.alternative is not None:
            parts.append("else")
            parts.append(str(self.alternative))
        return "".join(parts)


@dataclass
class FunctionLiteral(Node):
    """A function definition: its parameters and body."""

    token: Token
    parameters: list[Identifier] = field(default_factory=list)
    body: Optional[BlockStatement] = None

    def __str__(self) -> str:
        params = ", ".join(param.value for param in self.parameters)
        body = "" if self.body is None else str(self.body)
        return f"{self.token_literal()}({params}) {body}"


@dataclass
class CallExpression(Node):
    """A call of a function expression with arguments."""

    token: Token
    function: Optional[Expression]
    arguments: list[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        function = "" if self.function is None else str(self.function)
        args = ", ".join(str(arg) for arg in self.arguments)
        return f"{function}({args})"


@dataclass
class LetStatement(Node):
    """A binding of a name to the value of an expression."""

    token: Token
    name: Identifier
    value: Optional[Expression] = None

    def __str__(self) -> str:
        value = "" if self.value is None else str(self.value)
        return f"{self.token_literal()} {self.name.value} = {value}{_SENTENCE_END}"


@dataclass
class ReturnStatement(Node):
    """A statement returning the value of an expression."""

    token: Token
    return_value: Optional[Expression] = None

    def __str__(self) -> str:
        value = "" if self.return_value is None else str(self.return_value)
        return f"{self.token_literal()} {value}{_SENTENCE_END}"


@dataclass
class ExpressionStatement(Node):
    """A statement made of a single expression."""

    token: Token
    expression: Optional[Expression] = None

    def __str__(self) -> str:
        return "" if self.expression is None else str(self.expression)


@dataclass
class Program(Node):
    """The root of a parsed source: a list of statements."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        """The token literal of the first statement, or an empty string."""
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)


Expression = Union[
    Identifier,
    IntegerLiteral,
    PrefixExpression,
    InfixExpression,
    Boolean,
    IfExpression,
    FunctionLiteral,
    CallExpression,
]

Statement = Union[LetStatement, ReturnStatement, ExpressionStatement, BlockStatement]