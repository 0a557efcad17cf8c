from __future__ import annotations

# Single-character punctuation.
PUNCTUATION = frozenset(";(){},")

# Operators that are always exactly one character.
SINGLE_OPERATORS = frozenset("*/+-%")
# Operators that may be followed by `=` (`==`, `>=`, `<=`).
EQ_OPERATORS = frozenset("=><")
# Operators that only exist doubled (`&&`, `||`).
DOUBLED_OPERATORS = frozenset("&|")

# Order matters: prefixes are tried first to last.
BOOLEAN_LITERALS: tuple[str, ...] = ("true", "false")
CORE_TYPES: tuple[str, ...] = ("string", "float", "bool", "int")
KEYWORDS: tuple[str, ...] = ("if", "else", "while")

# Binary operators by precedence class, Op0 binds tightest.
OP0 = frozenset({"*", "/", "%"})
OP1 = frozenset({"+", "-"})
OP2 = frozenset({"==", ">", "<", ">=", "<="})
OP3 = frozenset({"&&", "||"})

GRAMMAR = """\
Program      := (Stmt ';' | If | While)*
Stmt         := Declaration | Assignment | FunctionCall
Declaration  := CoreType Ident '=' Expression
Assignment   := Ident '=' Expression
FunctionCall := Ident '(' ParameterList ')'
ParameterList:= (Expression | ',')*
If           := 'if' '(' Expression ')' '{' Program '}' ['else' '{' Program '}']
While        := 'while' '(' Expression ')' '{' Program '}'
Expression   := Term2 (Op3 Expression)?
Term2        := Term1 (Op2 Term2)?
Term1        := Term0 (Op1 Term1)?
Term0        := Atom  (Op0 Term0)?
Atom         := FunctionCall | Ident | NumberLiteral | StringLiteral | BooleanLiteral
"""
