import pytest

from merustmar import nodes
from merustmar.environment import Environment
from merustmar.evaluator import (
    eval_block_statement,
    eval_expression,
    eval_if_expression,
    eval_program,
    eval_statement,
    is_truthy,
)
from merustmar.objects import Boolean, ErrorObject, Integer, Null, ReturnValue
from merustmar.token import Token, TokenType

TRUE_WORD = "မှန်"
FALSE_WORD = "မှား"


def e(x):
    if isinstance(x, bool):
        word = TRUE_WORD if x else FALSE_WORD
        return nodes.Boolean(Token(TokenType.TRUE if x else TokenType.FALSE, word), x)
    if isinstance(x, int):
        return nodes.IntegerLiteral(Token(TokenType.INT, str(x)), x)
    if isinstance(x, str):
        return nodes.Identifier(Token(TokenType.IDENT, x), x)
    return x


def inf(left, op, right):
    return nodes.InfixExpression(Token(TokenType(op), op), e(left), op, e(right))


def pre(op, right):
    return nodes.PrefixExpression(Token(TokenType(op), op), op, e(right))


def stmt(x):
    expr = e(x)
    return nodes.ExpressionStatement(Token(TokenType.IDENT, expr.token_literal()), expr)


def ret(x):
    return nodes.ReturnStatement(Token(TokenType.RETURN, "ဒါယူ"), e(x))


def let(name, x):
    return nodes.LetStatement(Token(TokenType.LET, "ထား"), e(name), e(x))


def block(*stmts):
    return nodes.BlockStatement(Token(TokenType.LBRACE, "{"), list(stmts))


def if_(cond, cons, alt=None):
    return nodes.IfExpression(Token(TokenType.IF, "တကယ်လို့"), e(cond), cons, alt)


def program(*stmts):
    return nodes.Program([s if not isinstance(s, (int, str, nodes.Node)) or isinstance(
        s, (nodes.ExpressionStatement, nodes.LetStatement, nodes.ReturnStatement,
            nodes.BlockStatement)) else stmt(s) for s in stmts])


def run(*stmts):
    return eval_program(program(*stmts), Environment())


@pytest.mark.parametrize(
    "tree, expected",
    [
        (5, 5),
        (10, 10),
        (pre("-", 5), -5),
        (pre("-", 10), -10),
        (inf(inf(inf(inf(5, "+", 5), "+", 5), "+", 5), "-", 10), 10),
        (inf(inf(inf(inf(2, "*", 2), "*", 2), "*", 2), "*", 2), 32),
        (inf(inf(pre("-", 50), "+", 100), "+", pre("-", 50)), 0),
        (inf(inf(5, "*", 2), "+", 10), 20),
        (inf(5, "+", inf(2, "*", 10)), 25),
        (inf(20, "+", inf(2, "*", pre("-", 10))), 0),
        (inf(inf(inf(50, "/", 2), "*", 2), "+", 10), 60),
        (inf(2, "*", inf(5, "+", 10)), 30),
        (inf(inf(inf(3, "*", 3), "*", 3), "+", 10), 37),
        (inf(inf(3, "*", inf(3, "*", 3)), "+", 10), 37),
        (
            inf(
                inf(inf(inf(5, "+", inf(10, "*", 2)), "+", inf(15, "/", 3)), "*", 2),
                "+",
                pre("-", 10),
            ),
            50,
        ),
    ],
)
def test_eval_integer_expression(tree, expected):
    assert run(tree) == Integer(expected)


def test_tree_builder_matches_source_form():
    tree = inf(inf(5, "*", 2), "+", 10)
    assert str(program(tree)) == "((5 * 2) + 10)"


@pytest.mark.parametrize(
    "tree, expected",
    [
        (True, True),
        (False, False),
        (inf(1, "<", 2), True),
        (inf(1, ">", 2), False),
        (inf(1, "<", 1), False),
        (inf(1, ">", 1), False),
        (inf(1, "==", 1), True),
        (inf(1, "!=", 1), False),
        (inf(1, "==", 2), False),
        (inf(1, "!=", 2), True),
        (inf(True, "==", True), True),
        (inf(False, "==", False), True),
        (inf(True, "==", False), False),
        (inf(True, "!=", False), True),
        (inf(False, "!=", True), True),
        (inf(inf(1, "<", 2), "==", True), True),
        (inf(inf(1, "<", 2), "==", False), False),
        (inf(inf(1, ">", 2), "==", True), False),
        (inf(inf(1, ">", 2), "==", False), True),
    ],
)
def test_eval_boolean_expression(tree, expected):
    assert run(stmt(tree)) == Boolean(expected)


@pytest.mark.parametrize(
    "tree, expected",
    [
        (pre("!", True), False),
        (pre("!", False), True),
        (pre("!", 5), False),
        (pre("!", pre("!", True)), True),
        (pre("!", pre("!", False)), False),
        (pre("!", pre("!", 5)), True),
    ],
)
def test_bang_operator(tree, expected):
    assert run(tree) == Boolean(expected)


@pytest.mark.parametrize(
    "tree, expected",
    [(pre("-", 5), -5), (pre("-", 10), -10), (pre("-", pre("-", 5)), 5)],
)
def test_minus_operator(tree, expected):
    assert run(tree) == Integer(expected)


def _nested_if(inner_return):
    return if_(
        inf(10, ">", 1),
        block(
            stmt(if_(inf(10, ">", 1), block(ret(inner_return)))),
            ret(1),
        ),
    )


@pytest.mark.parametrize(
    "stmts, expected",
    [
        ([ret(10)], Integer(10)),
        ([ret(inf(5, "+", 5))], Integer(10)),
        ([ret(inf(2, "*", 5))], Integer(10)),
        ([ret(10), ret(20)], Integer(10)),
        ([ret(inf(2, ">", 1))], Boolean(True)),
        ([stmt(_nested_if(10))], Integer(10)),
    ],
)
def test_return_statements(stmts, expected):
    assert run(*stmts) == expected


@pytest.mark.parametrize(
    "stmts, message",
    [
        ([stmt(inf(5, "+", True))], "type mismatch: INTEGER + BOOLEAN"),
        ([stmt(inf(5, "+", True)), stmt(5)], "type mismatch: INTEGER + BOOLEAN"),
        ([stmt(pre("-", True))], "unknown operator: -BOOLEAN"),
        ([stmt(inf(True, "+", False))], "unknown operator: BOOLEAN + BOOLEAN"),
        (
            [stmt(5), stmt(inf(True, "+", False)), stmt(5)],
            "unknown operator: BOOLEAN + BOOLEAN",
        ),
        (
            [stmt(if_(inf(10, ">", 1), block(stmt(inf(True, "+", False)))))],
            "unknown operator: BOOLEAN + BOOLEAN",
        ),
        (
            [stmt(_nested_if(inf(True, "+", False)))],
            "unknown operator: BOOLEAN + BOOLEAN",
        ),
    ],
)
def test_error_handling(stmts, message):
    assert run(*stmts) == ErrorObject(message)


def test_let_binds_and_identifier_reads():
    env = Environment()
    result = eval_program(program(let("a", 5), stmt("a")), env)
    assert result == Integer(5)
    assert env.get("a") == Integer(5)


def test_let_statement_yields_no_value():
    env = Environment()
    assert eval_statement(let("b", inf(2, "*", 3)), env) is None
    assert env.get("b") == Integer(6)


def test_let_with_error_value_does_not_bind():
    env = Environment()
    result = eval_statement(let("c", inf(1, "+", True)), env)
    assert result == ErrorObject("type mismatch: INTEGER + BOOLEAN")
    assert "c" not in env


def test_identifier_not_found():
    assert run(stmt("missing")) == ErrorObject("identifier not found: missing")


def test_integer_division_truncates_toward_zero():
    assert run(inf(pre("-", 7), "/", 2)) == Integer(-3)
    assert run(inf(7, "/", 2)) == Integer(3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        run(inf(1, "/", 0))


def test_if_without_alternative_false_gives_null():
    assert eval_if_expression(if_(False, block(stmt(10))), Environment()) == Null()


def test_if_else_takes_alternative():
    tree = if_(inf(1, ">", 2), block(stmt(10)), block(stmt(20)))
    assert eval_expression(tree, Environment()) == Integer(20)


def test_if_truthy_integer_condition():
    assert eval_if_expression(if_(1, block(stmt(10))), Environment()) == Integer(10)


def test_block_keeps_return_wrapped():
    result = eval_block_statement(block(ret(10), stmt(20)), Environment())
    assert result == ReturnValue(Integer(10))


def test_block_stops_at_error():
    result = eval_block_statement(
        block(stmt(pre("-", True)), stmt(5)), Environment()
    )
    assert result == ErrorObject("unknown operator: -BOOLEAN")


def test_return_without_value_gives_null():
    statement = nodes.ReturnStatement(Token(TokenType.RETURN, "ဒါယူ"), None)
    assert eval_statement(statement, Environment()) == ReturnValue(Null())


def test_unknown_expression_is_error():
    func = nodes.FunctionLiteral(Token(TokenType.FUNCTION, "ဖန်ရှင်"), [], block())
    result = eval_expression(func, Environment())
    assert isinstance(result, ErrorObject)
    assert result.message.startswith("unknown expression: ")


@pytest.mark.parametrize(
    "obj, expected",
    [
        (Null(), False),
        (Boolean(False), False),
        (Boolean(True), True),
        (Integer(0), True),
        (Integer(5), True),
    ],
)
def test_is_truthy(obj, expected):
    assert is_truthy(obj) is expected