# core/safe_math.py
import sympy as sp

_ALLOWED_FUNCS = {
    # scalars
    "sin": sp.sin, "cos": sp.cos, "tan": sp.tan, "asin": sp.asin,
    "acos": sp.acos, "atan": sp.atan, "exp": sp.exp, "log": sp.log,
    "log10": lambda x: sp.log(x, 10), "sqrt": sp.sqrt, "abs": sp.Abs,
    # constants
    "pi": sp.pi, "e": sp.E,
}

def parse_expr(src: str) -> sp.Expr:
    """Parse *pure* maths, nothing else."""
    try:
        expr = sp.sympify(src, locals=_ALLOWED_FUNCS, convert_xor=True)
    except Exception as exc:
        raise ValueError(f"Bad expression '{src}': {exc}") from exc
    if not isinstance(expr, sp.Expr):
        raise ValueError(f"Bad expression '{src}': not a scalar expression")
    return expr
