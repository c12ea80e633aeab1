# merustmar

The building blocks of a small, expression-oriented programming language
whose keywords are written in Myanmar script. The package contains:

- `merustmar.token`: token kinds (`TokenType`), the frozen `Token` record
  (`token_type`, `literal`), and `lookup_ident` for telling keywords from
  identifiers.
- `merustmar.lexer`: a `Lexer` that turns source text into tokens, plus the
  character tests `is_letter` and `is_digit`.
- `merustmar.nodes`: syntax tree nodes: `Program`, `LetStatement`,
  `ReturnStatement`, `ExpressionStatement`, `BlockStatement`, `Identifier`,
  `IntegerLiteral`, `Boolean`, `PrefixExpression`, `InfixExpression`,
  `IfExpression`, `FunctionLiteral` and `CallExpression`. Every node has
  `token_literal()`, and `str()` renders a node as source-like text.
- `merustmar.objects`: runtime values (`Integer`, `Boolean`, `Null`,
  `ReturnValue`, `ErrorObject`), each with an `object_type` (`ObjectType`)
  and an `inspect()` method.
- `merustmar.environment`: the `Environment` that maps names to values
  (`get`, `set`).
- `merustmar.evaluator`: a tree-walking evaluator (`eval_program`,
  `eval_statement`, `eval_expression`, `eval_block_statement`,
  `eval_if_expression`, `is_truthy`).

## The language

| Keyword     | Meaning  |
|-------------|----------|
| `ထား`       | let      |
| `ဖန်ရှင်`    | function |
| `တကယ်လို့`   | if       |
| `မဟုတ်ရင်`   | else     |
| `ဒါယူ`      | return   |
| `မှန်`       | true     |
| `မှား`       | false    |

Statements end with the Myanmar full stop `။`. The tokens cover integers,
`+ - * /`, `< > == !=`, `!`, `=`, parentheses, braces and commas.
Identifiers may use ASCII letters, underscores, characters of the Myanmar
Unicode block (U+1000 to U+109F), and letters from other scripts. Any other
character becomes an `ILLEGAL` token.

## Tokenising

Iterating over a `Lexer` yields every token up to and including the `EOF`
token; `next_token()` reads one token at a time.

```python
from merustmar.lexer import Lexer

for token in Lexer("ထား five = 5။"):
    print(token.token_type, token.literal)
```

## Building and evaluating a tree

Trees are built from the classes in `merustmar.nodes` and evaluated against
an `Environment`:

```python
from merustmar.environment import Environment
from merustmar.evaluator import eval_program
from merustmar.nodes import ExpressionStatement, InfixExpression, IntegerLiteral, Program
from merustmar.token import Token, TokenType

five = IntegerLiteral(Token(TokenType.INT, "5"), 5)
ten = IntegerLiteral(Token(TokenType.INT, "10"), 10)
expr = InfixExpression(Token(TokenType.PLUS, "+"), five, "+", ten)
program = Program([ExpressionStatement(Token(TokenType.INT, "5"), expr)])

print(program)                 # (5 + 10)
result = eval_program(program, Environment())
print(result.inspect())        # 15
```

What the evaluator does:

- Integer literals, boolean literals, identifiers, prefix `!` and `-`,
  infix arithmetic and comparisons, and `if`/`else` are evaluated.
  Integer division truncates toward zero.
- A let statement binds its name in the environment and yields no value
  (`None`). A return statement stops the program or block; `eval_program`
  unwraps the returned value.
- `null` and `false` are falsy; every other value is truthy. An `if` whose
  chosen branch is missing yields `Null`.
- Runtime problems come back as `ErrorObject` values whose message says what
  went wrong, for example `type mismatch: INTEGER + BOOLEAN`,
  `unknown operator: -BOOLEAN` or `identifier not found: x`. Evaluation stops
  at the first error. Dividing by zero raises `ZeroDivisionError`.

## What the package does not do

- There is no parser: source text can be tokenised, but trees must be built
  from the node classes by hand.
- There is no interactive prompt and no command for running source files.
- Function literals and call expressions can be built and printed, but the
  evaluator does not run them; evaluating one yields an `ErrorObject`
  beginning `unknown expression:`.

## Installing for development

```
pip install -e ".[test]"
pytest
```