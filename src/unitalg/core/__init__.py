from unitalg.core.coefficient import Coefficient, Exact, Float
from unitalg.core.expr import Basic, Ratio, Scaled, UnitExpr, factor_out_coef, make_scaled
from unitalg.core.rational import Rational
from unitalg.core.unit_simplifier import cancel_units, divide, multiply

__all__ = [
    "Rational",
    "Coefficient",
    "Exact",
    "Float",
    "Basic",
    "Ratio",
    "Scaled",
    "UnitExpr",
    "make_scaled",
    "factor_out_coef",
    "cancel_units",
    "multiply",
    "divide",
]
