from bebop import EvaluatorFn
from bebop import Expression, LispValue
from bebop.errors import BebopArityError, BebopTypeError
from bebop.printer import to_string
from bebop.types.environment import Environment
from bebop.types.expressions import QExpr, is_number, promote


def if_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if cond [then] [else])
    The condition must be a Number: 0 selects else, anything else selects then.
    """
    if len(tail) != 3:
        raise BebopArityError(f"if needs 3 args but was given {len(tail)}")

    cond = evaluate_fn(tail[0], env)
    if not is_number(cond):
        raise BebopTypeError(
            f"if needs a number as its condition but was given {to_string(cond, top_level=False)}"
        )

    branches = []
    for label, operand in (("then", tail[1]), ("else", tail[2])):
        branch = evaluate_fn(operand, env)
        if not isinstance(branch, QExpr):
            raise BebopTypeError(
                f"if needs a Q-expression for {label} but was given {to_string(branch, top_level=False)}"
            )
        branches.append(branch)

    then_branch, else_branch = branches
    chosen = else_branch if cond == 0 else then_branch
    return evaluate_fn(promote(chosen), env)
