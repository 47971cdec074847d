# tests for unitalg.units.parser
import pytest
from structlog.testing import capture_logs

from unitalg.core.coefficient import Float, exact, unit
from unitalg.core.expr import Basic, Ratio, Scaled
from unitalg.exceptions import DefinitionError
from unitalg.units.parser import (
    DefinitionPlan,
    _DefinitionParser,
    compile_definition,
    evaluate_definition,
    parse_definition,
    resolve_reference,
)

cm = Basic("cm")


# --------------------------
# Parsing-only unit tests
# --------------------------

def test_parse_fundamental():
    plan = _DefinitionParser("cm !").parse()
    assert plan == DefinitionPlan("cm", fundamental=True)


def test_parse_fundamental_with_comment():
    plan = _DefinitionParser("cm     !   # base length").parse()
    assert plan.fundamental


def test_parse_float_coefficient_and_comment():
    plan = _DefinitionParser("inch                    2.54 cm # exact since 1959").parse()
    assert plan.name == "inch"
    assert plan.coefficient == Float(2.54)
    assert plan.refs == ("cm",)


def test_parse_integer_coefficient_is_exact():
    plan = _DefinitionParser("uscup 8 usfloz").parse()
    assert plan.coefficient == exact(8)


def test_parse_fraction_coefficient_is_exact():
    plan = _DefinitionParser("quart 1|4 gallon").parse()
    assert plan.coefficient == exact(1, 4)


def test_parse_exponent_notation_is_float():
    plan = _DefinitionParser("milli 1e-3").parse()
    assert plan.coefficient == Float(0.001)
    assert plan.refs == ()


def test_parse_power_expands_to_repetition():
    plan = _DefinitionParser("usgallon 231 in^3").parse()
    assert plan.coefficient == exact(231)
    assert plan.refs == ("in", "in", "in")


def test_parse_zero_power_contributes_nothing():
    plan = _DefinitionParser("x cm cm^0").parse()
    assert plan.refs == ("cm",)


def test_parse_plain_alias():
    plan = _DefinitionParser("in inch").parse()
    assert plan == DefinitionPlan("in", refs=("inch",))


@pytest.mark.parametrize("line", ["", "   ", "# just a comment", "   # indented"])
def test_blank_and_comment_lines_yield_none(line):
    assert _DefinitionParser(line).parse() is None


# --------------------------
# Fatal parse errors
# --------------------------

@pytest.mark.parametrize("line", [
    "x 1.2.3 cm",
    "x 2.54cm",
    "x 1.5|2 cm",
    "x cm^y",
    "x ^2",
    "x cm^2^3",
    "x",
])
def test_malformed_lines_raise(line):
    with pytest.raises(DefinitionError):
        _DefinitionParser(line).parse()


def test_zero_denominator_literal_is_fatal():
    with pytest.raises(ZeroDivisionError):
        _DefinitionParser("x 1|0 cm").parse()


def test_compile_definition_reports_line_number():
    with pytest.raises(DefinitionError) as info:
        compile_definition("bad 1.2.3 cm", lineno=7)
    assert info.value.lineno == 7
    assert info.value.line == "bad 1.2.3 cm"
    assert str(info.value).startswith("line 7: ")


def test_compile_definition_caches_plans():
    first = compile_definition("foot 12 inch")
    assert compile_definition("foot 12 inch") is first


# --------------------------
# Resolution against a registry
# --------------------------

def test_resolve_basic():
    assert resolve_reference(cm) == (unit(), [cm])


def test_resolve_scaled_threads_coefficient():
    coef, atoms = resolve_reference(Scaled(Float(2.54), Ratio((cm,))))
    assert coef == Float(2.54)
    assert atoms == [cm]


def test_resolve_ratio_drops_denominator_with_warning():
    s = Basic("s")
    with capture_logs() as logs:
        coef, atoms = resolve_reference(Ratio((cm,), (s,)))
    assert coef == unit()
    assert atoms == [cm]
    assert logs[0]["event"] == "denominator_dropped"
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["dropped"] == ["s"]


def test_evaluate_fundamental():
    plan = compile_definition("cm !")
    assert evaluate_definition(plan, {}) == cm


def test_evaluate_alias_of_fundamental_is_bare_ratio():
    assert parse_definition("centi cm", {"cm": cm}) == ("centi", Ratio((cm,), ()))


def test_evaluate_accumulates_reference_coefficients():
    units = {"cm": cm, "inch": Scaled(Float(2.54), Ratio((cm,)))}
    name, expr = parse_definition("cubicinch inch^3", units)
    assert name == "cubicinch"
    assert expr.expr == Ratio((cm, cm, cm), ())
    assert expr.coefficient.as_float() == pytest.approx(2.54 ** 3)


def test_evaluate_line_coefficient_multiplies_in_last():
    units = {"gallon": Basic("gallon"), "quart": Scaled(exact(1, 4), Ratio((Basic("gallon"),)))}
    _, expr = parse_definition("pint 1|2 quart", units)
    assert expr == Scaled(exact(1, 8), Ratio((Basic("gallon"),), ()))


def test_evaluate_exact_coefficients_cancelling_to_one_unwrap():
    units = {"cm": cm, "half": Scaled(exact(1, 2), Ratio((cm,)))}
    _, expr = parse_definition("whole 2 half", units)
    assert expr == Ratio((cm,), ())


def test_evaluate_coefficient_only_line():
    _, expr = parse_definition("dozen 12", {})
    assert expr == Scaled(exact(12), Ratio())
    assert str(expr) == "12"


def test_evaluate_undefined_reference_is_dropped_with_warning():
    with capture_logs() as logs:
        name, expr = parse_definition("x 2 furlong cm", {"cm": cm})
    assert expr == Scaled(exact(2), Ratio((cm,), ()))
    assert [e["event"] for e in logs] == ["undefined_reference"]
    assert logs[0]["reference"] == "furlong"
    assert logs[0]["unit"] == "x"


def test_parse_definition_skips_comment_lines():
    assert parse_definition("# nothing here", {}) is None
