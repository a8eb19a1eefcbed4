from bebop import EvaluatorFn
from bebop import Expression, LispValue
from bebop.errors import BebopArityError, BebopTypeError
from bebop.printer import to_string
from bebop.types.bind import split_formals
from bebop.types.environment import Environment
from bebop.types.expressions import QExpr
from bebop.types.lambda_fn import Lambda


def lambda_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (\\ [formals] [body])
    Both operands are evaluated, so computed formals such as (tail args) work.
    The body is kept unevaluated and the current env is captured.
    """
    if len(tail) != 2:
        raise BebopArityError(f"\\ needs 2 args but was given {len(tail)}")

    formals, body = (evaluate_fn(operand, env) for operand in tail)
    for operand in (formals, body):
        if not isinstance(operand, QExpr):
            raise BebopTypeError(
                f"\\ needs a Q-expression for formals and body but was given {to_string(operand, top_level=False)}"
            )

    # Validates symbols and the ':' rest marker
    split_formals(tuple(formals))
    return Lambda(tuple(formals), body, env)
