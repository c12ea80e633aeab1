"""Tree-walking evaluation of parsed programs."""

from __future__ import annotations

from typing import Optional

from merustmar import nodes
from merustmar.environment import Environment
from merustmar.objects import (
    FALSE,
    NULL,
    TRUE,
    Boolean,
    ErrorObject,
    Integer,
    Null,
    Object,
    ObjectType,
    ReturnValue,
)


def _boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def eval_program(program: nodes.Program, env: Environment) -> Optional[Object]:
    """Evaluate every statement of ``program``.

    Stops at the first error or return. A returned value is unwrapped.
    """
    result: Optional[Object] = None
    for statement in program.statements:
        if isinstance(result, ErrorObject):
            return result
        result = eval_statement(statement, env)
        if isinstance(result, ReturnValue):
            return result.value
    return result


def eval_statement(statement: nodes.Statement, env: Environment) -> Optional[Object]:
    """Evaluate one statement; let and block statements yield no value."""
    match statement:
        case nodes.LetStatement(value=value, name=name):
            if value is None:
                return None
            val = eval_expression(value, env)
            if val is None:
                return None
            if isinstance(val, ErrorObject):
                return val
            env.set(name.value, val)
            return None
        case nodes.ExpressionStatement(expression=expression):
            if expression is None:
                return None
            return eval_expression(expression, env)
        case nodes.ReturnStatement(return_value=return_value):
            val = None if return_value is None else eval_expression(return_value, env)
            return ReturnValue(NULL if val is None else val)
        case _:
            return None


def eval_expression(expr: nodes.Expression, env: Environment) -> Optional[Object]:
    """Evaluate an expression to a value, an error object, or None."""
    match expr:
        case nodes.IntegerLiteral(value=value):
            return Integer(value)
        case nodes.Identifier():
            return _eval_identifier(expr, env)
        case nodes.Boolean(value=value):
            return _boolean(value)
        case nodes.PrefixExpression():
            return _eval_prefix_expression(expr, env)
        case nodes.InfixExpression():
            return _eval_infix_expression(expr, env)
        case nodes.IfExpression():
            return eval_if_expression(expr, env)
        case _:
            return ErrorObject(f"unknown expression: {expr!r}")


def eval_block_statement(block: nodes.BlockStatement, env: Environment) -> Optional[Object]:
    """Evaluate a block; a return value is passed up still wrapped."""
    result: Optional[Object] = None
    for statement in block.statements:
        if isinstance(result, ErrorObject):
            return result
        result = eval_statement(statement, env)
        if isinstance(result, ReturnValue):
            return result
    return result


def _eval_prefix_expression(prefix: nodes.PrefixExpression, env: Environment) -> Optional[Object]:
    if prefix.right is None:
        return None
    right = eval_expression(prefix.right, env)
    if right is None:
        return None
    if prefix.operator == "!":
        return _eval_bang(right)
    if prefix.operator == "-":
        return _eval_minus(right)
    return ErrorObject(f"unknown operator: {prefix.operator}{right.object_type}")


def _eval_bang(right: Object) -> Boolean:
    if isinstance(right, Boolean):
        return _boolean(not right.value)
    if isinstance(right, Null):
        return TRUE
    return FALSE


def _eval_minus(right: Object) -> Object:
    if isinstance(right, Integer):
        return Integer(-right.value)
    return ErrorObject(f"unknown operator: -{right.object_type}")


def _eval_infix_expression(infix: nodes.InfixExpression, env: Environment) -> Optional[Object]:
    if infix.right is None or infix.left is None:
        return None
    right = eval_expression(infix.right, env)
    if right is None:
        return None
    left = eval_expression(infix.left, env)
    if left is None:
        return None

    if left.object_type != right.object_type:
        return ErrorObject(
            f"type mismatch: {left.object_type} {infix.operator} {right.object_type}"
        )
    if left.object_type == ObjectType.INTEGER:
        return _eval_integer_infix(left.value, right.value, infix.operator)
    if infix.operator == "==":
        return _boolean(left == right)
    if infix.operator == "!=":
        return _boolean(left != right)
    return ErrorObject(
        f"unknown operator: {left.object_type} {infix.operator} {right.object_type}"
    )


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _eval_integer_infix(left: int, right: int, operator: str) -> Object:
    match operator:
        case "+":
            return Integer(left + right)
        case "-":
            return Integer(left - right)
        case "*":
            return Integer(left * right)
        case "/":
            return Integer(_truncating_div(left, right))
        case ">":
            return _boolean(left > right)
        case "<":
            return _boolean(left < right)
        case "==":
            return _boolean(left == right)
        case "!=":
            return _boolean(left != right)
        case _:
            return ErrorObject(f"unknown operator: {operator}")


def eval_if_expression(if_exp: nodes.IfExpression, env: Environment) -> Optional[Object]:
    """Evaluate the branch chosen by the condition, or null when there is none."""
    if if_exp.condition is None:
        return None
    condition = eval_expression(if_exp.condition, env)
    if condition is None:
        raise ValueError("if condition produced no value")

    if is_truthy(condition):
        if if_exp.consequence is None:
            return NULL
        return eval_block_statement(if_exp.consequence, env)
    if if_exp.alternative is not None:
        return eval_block_statement(if_exp.alternative, env)
    return NULL


def is_truthy(obj: Object) -> bool:
    """Null and false are falsy; every other value is truthy."""
    if isinstance(obj, Null):
        return False
    if isinstance(obj, Boolean):
        return obj.value
    return True


def _eval_identifier(node: nodes.Identifier, env: Environment) -> Object:
    value = env.get(node.value)
    if value is None:
        return ErrorObject(f"identifier not found: {node.value}")
    return value