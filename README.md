# hackvm

`hackvm` translates programs written in the Hack virtual machine's stack
language into Hack assembly.

## Supported commands

- Arithmetic and logic: `add`, `sub`, `neg`, `eq`, `gt`, `lt`, `and`, `or`, `not`
- Memory access: `push <segment> <index>` and `pop <segment> <index>`, where
  the segment is one of `constant`, `local`, `argument`, `this`, `that`,
  `static`, `temp` (index 0–7) or `pointer` (index 0 or 1)

There is exactly one command per line. A single newline before the first
command and a single newline after the last are accepted; any other empty
line is a parse error. Spaces, tabs and form feeds between words are
ignored. Any other character, including a carriage return, is a lexing
error.

How segments are addressed:

- `local`, `argument`, `this`, `that`: the base pointer `LCL`, `ARG`,
  `THIS` or `THAT` plus the index
- `static`: the symbol `<scope>.<index>`
- `temp`: RAM address `5 + index`
- `pointer`: `THIS` for 0, `THAT` for 1
- `constant`: the index itself; it can be pushed but not popped

Comparisons (`eq`, `gt`, `lt`) use the labels `TRUE.<scope>.<n>` and
`END.<scope>.<n>`, where `n` is the command's position in the program,
counted from 0.

## Command line

```
hackvm --input Main.vm --output Main.asm
```

The short forms are `-i` and `-o`. Both options default to `-`, which means
standard input and standard output:

```
hackvm < Main.vm > Main.asm
```

The input file's name, extension included (for example `Main.vm`), is used as
the scope for `static` symbols and comparison labels. When the program is
read from standard input, the scope `IO` is used.

On failure the command prints `Error: ...` to standard error and exits with
status 1; a missing input file is reported as `no such file: <path>`, and
translation problems as `vm error: ...`.

## Library

```python
from hackvm.translator import parse, generate

instructions = parse("push constant 1\npush constant 2\nadd")
assembly = generate(instructions, "Main")
print(assembly)
```

`parse` returns a list of `Push`, `Pop` and `Arithmetic` objects from
`hackvm.models`. It raises `LexingError` for text it does not recognise and
`ParsingError` for malformed commands. `generate` raises `GeneratingError`
for addresses that cannot be formed, such as `temp 8`, `pointer 2` or
`pop constant 0`. All three derive from `VMError`.

Lower-level pieces are available too: `hackvm.models.tokenize` splits text
into `Token` objects, and `hackvm.generate.generate_instruction` translates a
single instruction.

## What it does not do

- Only the arithmetic and memory-access commands above are understood;
  `label`, `goto`, `if-goto`, `function`, `call` and `return` are not.
- Comments (`//`) are not accepted and cause a lexing error.
- One input is translated at a time; directories of files are not read, and
  no bootstrap code is emitted.