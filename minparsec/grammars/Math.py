"""
Simple math grammar
===================
expr   ::= term (addop term)*
term   ::= factor (mulop factor)*
factor ::= number | ( expr )
addop  ::= + | -
mulop  ::= * | /
number ::= digit+ ( . digit+ )?
"""
import operator
from dataclasses import dataclass
from typing import Callable, Dict, Union

from minparsec.Parsec import Parser
from minparsec.Prim import lazy, run_parser
from minparsec.Char import char, digit, symbol, token
from minparsec.Combinators import between, chain_left, choice, lazy_choice, some


@dataclass(frozen=True)
class Number:
    value: Union[int, float]


@dataclass(frozen=True)
class BinaryExpression:
    operator: str
    left: 'Expression'
    right: 'Expression'


Expression = Union[Number, BinaryExpression]

OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
}


def make_operator(op: str) -> Parser[Callable[[Expression, Expression], Expression]]:
    return symbol(op).map(lambda _: lambda left, right: BinaryExpression(op, left, right))


plus_minus = choice(make_operator('+'), make_operator('-'))
mul_div = choice(make_operator('*'), make_operator('/'))

int_string = some(digit).map(lambda ds: "".join(ds))
real_string = int_string.bind(lambda ds: char('.') > int_string.map(lambda rs: ds + "." + rs))


def _to_number(s: str) -> Number:
    return Number(float(s) if '.' in s else int(s))


numeric: Parser[Expression] = token(choice(real_string, int_string)).map(_to_number)


def expr() -> Parser[Expression]:
    return chain_left(term(), plus_minus)


def term() -> Parser[Expression]:
    return chain_left(factor(), mul_div)


def factor() -> Parser[Expression]:
    return lazy_choice(
        lambda: numeric,
        lambda: between(symbol('('), symbol(')'), lazy(expr)),
    )


parser: Parser[Expression] = expr()


def evaluate(expression: Expression) -> Union[int, float]:
    """Evaluate an expression tree. Division by zero raises ZeroDivisionError."""
    if isinstance(expression, Number):
        return expression.value
    apply = OPERATIONS[expression.operator]
    return apply(evaluate(expression.left), evaluate(expression.right))


if __name__ == "__main__":
    test_cases = [
        "2 + 3",
        "2 * 3",
        "2 + 3 * 4",
        "(2 + 3) * 4",
        "4 - 2 + 3",
        "10 / 4",
        "10 / (2 - 2)",
    ]

    print(f"{'Expression':<20} | {'Result':<10}")
    print("-" * 35)

    for expr_str in test_cases:
        tree, err = run_parser(parser, expr_str)
        if err:
            print(f"{expr_str:<20} | Error: {err}")
            continue
        try:
            print(f"{expr_str:<20} | {evaluate(tree)}")
        except ZeroDivisionError as e:
            print(f"{expr_str:<20} | Runtime Error: {e}")
