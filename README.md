# mdsl

A front end for a small C-like language. Source text becomes a list of
tokens, and the tokens become a syntax tree of statements and expressions.

The language has:

- `var` and `val` bindings: `var x = 0;`, `val y = 4.20;`
- integer, float, string, character, `true`, `false` and `null` literals
- prefix `-` and `!`, infix arithmetic, comparison, equality and logical
  operators, and the ternary `cond ? a : b`
- `if`/`else`, `while`, `for`, `return` and `{ ... }` blocks
- `//` line comments and `/* ... */` block comments

The lexer also recognises further keywords (`fn`, `struct`, `enum`,
`match`) and operators (brackets, `->`, bitwise and compound-assignment
operators), but the parser gives them no meaning of their own.

## Installation

```
pip install .
```

Add the `test` extra to get the test runner: `pip install ".[test]"`.

## Command line

```
mdsl [path]
```

With a `path`, the command reads that file as UTF-8; without one it uses a
built-in sample program. It prints the input, then the syntax tree. Each
lexical error, or a parse error, is written to standard error and the
command exits with status 1; otherwise it exits with status 0.

## Library use

```python
from mdsl.lexer import lex_with_errors
from mdsl.parser import parse_source, ParseError

result = lex_with_errors("var x = 1 + 2 * 3;")
for error in result.errors:
    print(error.span, error.fragment)

statements = parse_source(result.tokens)
print(statements)
```

`lex_with_errors(source)` returns a `LexResult` with two lists: `tokens`
and `errors`. Each `LexError` holds a `span` (a `range` of character
positions) and the `fragment` of text that could not be lexed: a single
character no token starts with, or an integer literal too large for a
signed 64-bit value.

`tokenize(source)` is a generator that yields the same items in source
order, `Token` and `LexError` objects mixed together.

A `Token` (in `mdsl.tokens`) has a `kind`, a `TokenKind` member, and a
`value` for integers, floats, strings, characters and identifiers. String
and character values keep escape sequences as written. `Token.precedence()`
gives the `Precedence` the token binds with as an infix operator.

A `Parser` can also read a single expression or statement:

```python
from mdsl.lexer import lex_with_errors
from mdsl.parser import Parser
from mdsl.tokens import Precedence

parser = Parser(lex_with_errors("a ? b : c;").tokens)
expression = parser.parse_expression(Precedence.LOWEST)
```

`Parser.parse_statement()` reads one statement, `Parser.at_end()` tells
whether input is exhausted (or the next token is `null`), and
`Parser.skip_semicolon()` consumes a stray `;`. `parse_source(tokens)`
parses a whole program, skipping stray semicolons between statements.
Syntax errors are raised as `ParseError`.

The tree is made of expression nodes (`Literal`, `Identifier`, `Prefix`,
`Infix`, `Ternary`, `Grouping`) and statement nodes (`ExprStmt`, `VarDecl`,
`ValDecl`, `If`, `While`, `For`, `Return`, `Block`). All of them are frozen
dataclasses that compare by value. A `Literal` built from a character
literal has `char=True`.

## What it does not do

The package stops at the syntax tree. `mdsl.semantics.check(ast)` accepts
every program; its `UndefinedVariable` and `TypeMismatch` errors are defined
but never raised. Nothing evaluates a program or generates code from it.

## Running the tests

```
pytest
```