# daelang

An interpreter for **dae**, a tiny language built around named functions
(`work` blocks), calls and literal returns.

## Installation

```
pip install .
```

## The language

A program is a sequence of functions. Execution starts at `main`.

```
work greet(string: who) {
    print -> "Hello from greet\n"
    return -> 0
}

work main(): int {
    print -> "Starting", "\n"
    greet -> "world"
}
```

- `work name(type: param, ...) [: type] { ... }` declares a function.
  The type words the lexer knows are `bool`, `int` and `string`.
- `name()` calls a function with no arguments.
- `name -> arg, arg, ...` calls a function with literal arguments
  (strings in double quotes, decimal numbers, `true`/`false`).
  A call to a function declared *earlier* in the file is checked when
  parsed: the number of arguments must match, and each argument's type
  (`string`, `bool` or `number`) must equal the parameter's declared type.
  Because number literals have type `number`, a parameter declared `int`
  accepts no literal. Calling a name that is neither declared earlier nor
  built in is a parse error.
- `return -> value` returns a number, string or boolean literal.
- `print` is the only built-in function. It writes its arguments with no
  separator and no trailing newline, expanding the escapes `\n`, `\t` and
  `\\`; any other escaped character stands for itself.

Arguments are checked but not bound: a function body cannot refer to its
parameters. Calling a declared function ends the calling function, which
returns whatever the called function returned (or nothing, if it ran off
its end). Return types are not checked.

Identifiers are ASCII letters followed by letters or digits. An
unterminated string or any character that starts no token is a lexing
error.

## Command line

```
dae run program.dae
dae help
```

`dae run` reads the first file named (UTF-8), runs it, and exits with
status 0. It exits with status 1, printing the message to standard error,
when the file cannot be read, on a lexing or runtime error (prefixed
`[ERROR]`), on a parse error (prefixed `[Parsing Error]`), or when `main`
finishes without returning a value. `dae` with no arguments prints usage
and exits with 1; an unknown action exits with 1 silently.

The same tool can be started as `python -m daelang.cli`.

## Library use

```python
from daelang.cli import interpret

value = interpret('work main() { print -> "hi\\n" return -> 7 }')
assert value == 7
```

`interpret` returns the value `main` returned and raises
`daelang.errors.InterpreterError` if there is none.

Lower-level pieces:

- `daelang.lexer.tokenize(source)` returns a list of `Token(type, text)`,
  ending with an `EOF` token.
- `daelang.parser.parse(tokens)` returns a `Parser` whose `functions`
  holds the parsed `FunctionNode`s and whose `natives` maps built-in names
  to callables.
- `daelang.interpreter.Interpreter(functions, natives).run()` runs `main`
  and returns an `InterpreterResult` with `kind` and `data`.
- `daelang.natives.native_print(args, stream)` and
  `daelang.natives.interpret_escapes(text)` implement `print`.

All errors are subclasses of `daelang.errors.DaeError`: `LexerError`,
`ParserError` and `InterpreterError`.

## What it does not do

There are no variables, expressions, conditionals or loops, and no way to
use a function's parameters or a call's result inside a body. Only the
first file given to `dae run` is executed.