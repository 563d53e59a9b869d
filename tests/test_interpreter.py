import io

import pytest

from wnlang.interpreter import (
    Function,
    Interpreter,
    InterpreterError,
    Returned,
    main,
)
from wnlang.nodes import (
    BinOp,
    FunctionCall,
    Number,
    Return,
    StringLiteral,
    Type,
    Variable,
)
from wnlang.objects import VOID, Value


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def interp(out):
    return Interpreter(stdout=out)


def test_declaration_stores_value(interp):
    interp.run("x: int = 42")
    assert interp.variables["x"] == Value(Type.INT, 42)


def test_reassignment_replaces_value(interp):
    interp.run("x: int = 1\nx = 42")
    assert interp.variables["x"] == Value(Type.INT, 42)


def test_println_writes_values_and_newline(interp, out):
    result = interp.evaluate(FunctionCall("println", (StringLiteral("hi"), Number(7))))
    assert result == VOID
    assert out.getvalue() == "hi 7 \n"


def test_print_has_no_newline(interp, out):
    result = interp.evaluate(FunctionCall("print", (StringLiteral("hi"),)))
    assert result == VOID
    assert out.getvalue() == "hi "


def test_string_concatenation(interp):
    interp.run('s: string = "ab" + "cd"')
    assert interp.variables["s"].data == "ab" + "cd"


def test_string_repetition(interp):
    interp.run('s: string = "ab" * 3')
    assert interp.variables["s"].data == "ab" * 3


def test_addition_is_commutative(interp):
    a = interp.evaluate(BinOp(Number(6), Number(4), "+"))
    b = interp.evaluate(BinOp(Number(4), Number(6), "+"))
    assert a == b
    assert a.kind is Type.INT


def test_subtract_then_add_restores(interp):
    expr = BinOp(BinOp(Number(9), Number(4), "-"), Number(4), "+")
    assert interp.evaluate(expr) == Value(Type.INT, 9)


def test_division_truncates_toward_zero(interp):
    negative = BinOp(BinOp(Number(0), Number(7), "-"), Number(2), "/")
    positive = BinOp(Number(7), Number(2), "/")
    assert interp.evaluate(negative).data == -interp.evaluate(positive).data
    assert interp.evaluate(negative).data == -3


def test_division_by_zero(interp):
    with pytest.raises(InterpreterError):
        interp.evaluate(BinOp(Number(1), Number(0), "/"))


def test_int_overflow_is_error(interp):
    expr = BinOp(BinOp(Number(3000), Number(3000), "*"), Number(3000), "*")
    with pytest.raises(InterpreterError):
        interp.evaluate(expr)


@pytest.mark.parametrize("op", ["-", "*", "/"])
def test_string_string_only_supports_plus(interp, op):
    with pytest.raises(InterpreterError):
        interp.evaluate(BinOp(StringLiteral("a"), StringLiteral("b"), op))


def test_string_int_only_supports_times(interp):
    with pytest.raises(InterpreterError):
        interp.evaluate(BinOp(StringLiteral("a"), Number(2), "+"))


def test_int_string_is_unsupported(interp):
    with pytest.raises(InterpreterError):
        interp.evaluate(BinOp(Number(2), StringLiteral("a"), "*"))


def test_undefined_variable(interp):
    with pytest.raises(InterpreterError):
        interp.evaluate(Variable("nope", Type.INT))


def test_function_definition_is_registered(interp):
    interp.run("fn f(a: int): void { }")
    function = interp.functions["f"]
    assert isinstance(function, Function)
    assert function.return_type is Type.VOID
    assert [arg.name for arg in function.args] == ["a"]


def test_function_call_returns_value(interp):
    interp.run("fn add(a: int, b: int): int { return a + b }\nr: int = add(2, 3)")
    expected = interp.evaluate(BinOp(Number(2), Number(3), "+"))
    assert interp.variables["r"] == expected


def test_function_takes_string_argument(interp, out):
    interp.run("fn greet(s: string): void { println(s) }")
    result = interp.evaluate(FunctionCall("greet", (StringLiteral("bob"),)))
    assert result == VOID
    assert out.getvalue() == "bob \n"


def test_function_takes_variable_argument(interp):
    interp.run(
        "fn id(a: int): int { return a }\n"
        "x: int = 42\n"
        "r: int = id(x)"
    )
    assert interp.variables["r"] == Value(Type.INT, 42)


def test_function_does_not_see_globals(interp):
    interp.run("g: int = 1\nfn f(): int { return g }")
    with pytest.raises(InterpreterError):
        interp.run("f()")


def test_globals_restored_after_call(interp):
    interp.run(
        "x: int = 42\n"
        "fn f(x: int): void { x = 5 }\n"
        "f(7)"
    )
    assert interp.variables["x"] == Value(Type.INT, 42)


def test_missing_return_in_int_function(interp):
    interp.run("fn f(): int { }")
    with pytest.raises(InterpreterError):
        interp.evaluate(FunctionCall("f"))


def test_void_function_returns_void(interp):
    interp.run("fn f(): void { }")
    assert interp.evaluate(FunctionCall("f")) == VOID


def test_argument_type_mismatch(interp):
    interp.run("fn f(a: int): void { }")
    with pytest.raises(InterpreterError):
        interp.run('f("s")')


def test_too_many_arguments(interp):
    interp.run("fn f(a: int): void { }")
    with pytest.raises(InterpreterError):
        interp.evaluate(FunctionCall("f", (Number(1), Number(2))))


def test_variable_with_wrong_runtime_value(interp):
    interp.run('x: int = "s"\nfn f(a: int): void { }')
    with pytest.raises(InterpreterError):
        interp.run("f(x)")


def test_unknown_function_returns_void(interp):
    assert interp.evaluate(FunctionCall("missing", (Number(1),))) == VOID


def test_scan_reads_line():
    interp = Interpreter(stdin=io.StringIO("hello\n"))
    assert interp.evaluate(FunctionCall("scan")) == Value(Type.STRING, "hello")


def test_quit_exits_successfully(interp):
    with pytest.raises(SystemExit) as info:
        interp.run("quit()")
    assert info.value.code == 0


def test_execute_return_produces_returned(interp):
    state = interp.execute(Return(StringLiteral("done")))
    assert state == Returned(Value(Type.STRING, "done"))


def test_execute_expression_continues(interp, out):
    assert interp.execute(FunctionCall("print", (StringLiteral("x"),))) is None
    assert out.getvalue() == "x "


def test_run_empty_source_does_nothing(interp):
    interp.run("")
    assert interp.variables == {}
    assert interp.functions == {}


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "hello.wn"
    script.write_text('println("hello")\n', encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "hello \n"


def test_main_reports_runtime_error(tmp_path, capsys):
    script = tmp_path / "bad.wn"
    script.write_text("x: int = 1 / 0\n", encoding="utf-8")
    assert main([str(script)]) == 1
    assert "error" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.wn")]) == 1