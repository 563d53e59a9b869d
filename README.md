# wnlang

An interpreter for a small, statically typed scripting language. Source text
is turned into tokens, parsed into a syntax tree and then evaluated directly.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running a program

```
wnlang path/to/program.wn
```

With no path, `wnlang` runs `examples/hello_world.wn` from the current
directory. Lexing, parsing and runtime errors, and a file that cannot be
read, are reported on standard error and the command exits with status 1;
otherwise it exits with status 0.

## The language

Variables are declared with a type and may be reassigned later:

```
greeting: string = "hello"
count: int = 3
println(greeting * count)
count = count + 1
```

Declarable types are `int`, `float`, `string`, `bool`, `char`, `long` and
`short`. A declaration without a value takes the type's default (`0`, `""`,
`false`, `0.0`, the NUL character). Integer literals above 3600 are read as
`long`; `int` values are 32-bit and overflow is an error. Character literals
use single quotes and understand the escapes `\n`, `\t`, `\r`, `\\` and `\'`.
Text from `#` to the end of the line is a comment. Unknown characters are
reported on standard output and skipped.

Arithmetic uses `+`, `-`, `*` and `/` with the usual precedence and
parentheses, on `int` operands; division truncates toward zero and dividing
by zero is an error. Strings can be joined with `+` and repeated with
`string * int`. Other operand combinations are errors.

Functions declare typed arguments and a return type (`int`, `string`, `bool`
or `void`):

```
fn add(a: int, b: int): int {
    return a + b
}

println(add(2, 3))
```

A function body sees only its own arguments and the variables it declares,
not the variables of the caller. Arguments may be string literals, integer
literals, the result of an operation, or variables, and must match the
declared argument types. The returned value must match the declared return
type; a function with no `return` returns `void`. Calling a name that is
neither a built-in nor a defined function does nothing and yields `void`.

Built-in functions:

- `println(...)` prints its arguments, each followed by a space, then a newline
- `print(...)` does the same without the newline
- `scan()` reads one line from standard input and returns it as a string,
  with trailing whitespace removed
- `quit()` ends the program with status 0

## What it does not do

The words `if`, `for` and `while` are recognised as keywords, but the parser
has no conditionals or loops: a program runs straight through from top to
bottom, with function calls as the only branching. There are no comparison
operators, and arithmetic on `float`, `long`, `short` or `char` values is
not supported.

## Using it from Python

```python
from wnlang.interpreter import Interpreter

Interpreter().run('x: int = 2 * 21\nprintln(x)\n')
```

`Interpreter(stdout=..., stdin=...)` takes optional text streams that the
built-ins write to and read from instead of standard output and input. One
interpreter keeps its variables, functions and declared variable types
across calls to `run`.

The pieces can also be used one at a time: `wnlang.lexer.tokenize` turns
text into `Token` objects, `wnlang.parser.parse` turns tokens into the nodes
defined in `wnlang.nodes`, and `Interpreter.execute` and
`Interpreter.evaluate` run nodes and expressions, producing `Value` objects
from `wnlang.objects`. Lexing, parsing and runtime errors raise `LexError`,
`ParseError` and `InterpreterError`.