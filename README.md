# bebopc

Keyword tables and a keyword lexer for the Bebop language, together with a
few small console I/O helpers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Keywords

`bebopc.keywords` holds the three keyword tables of the language:

- `IDENTIFIERS`: words such as `if`, `fn`, `let` and `i32`
- `OBJECTS`: `IO`, `File`, `Buffer`, `HashMap`, `String`, `Set`, `List`, `Type`
- `METHODS`: words such as `push`, `wrtln` and `to_string`

Each entry is a frozen `Keyword` with `text`, a numeric `code`, a `kind`
(a `KeyKind`: `IDENT`, `OBJECT` or `FN`) and a `length` property giving the
word's length in bytes.

`string_code(word)` computes the 32-bit code for a word given as `str` or
`bytes`. It raises `ValueError` for an empty word. `is_a_keyword(word)`
returns the matching `Keyword`, or `None`. It searches the objects first,
then the methods, then the identifiers. The lookup is by code and length,
and the text is then checked.

```python
from bebopc.keywords import is_a_keyword, KeyKind

kw = is_a_keyword("List")
assert kw is not None and kw.kind is KeyKind.OBJECT
```

`ObjectType` is an enum of the value types the language knows about
(`I8` … `U128`, `F32`, `F64`, `CHAR`, `STR`, `STRING`, `ARRAY`, `BUFFER`,
`HASHMAP`, `LIST`, `SET`, `STRUCT`, `ENUM`).

## Lexer

`bebopc.lexer.tokenize(source)` takes UTF-8 source as `str` or `bytes` and
returns a list of `Token` objects, one for each word that is a keyword. A
`Token` exposes `keyword`, `text` and `kind`. Words that are not keywords are
dropped.

Words are ended by punctuation characters such as `.`, `:`, `(`, `;` and
newline, and by a set of two-byte characters such as `²`, `£` and `©`. The
ending character itself is discarded. Spaces are skipped and do **not** end a
word, so `fn main` is read as the single word `fnmain`.

```python
from bebopc.lexer import tokenize

for token in tokenize("fn(main):IO.wrtln"):
    print(token.text, token.kind)
```

`tokenize` raises `LexicalError` on input it cannot handle. This covers an
invalid UTF-8 lead byte, a character cut short at the end of the input, any
four-byte character, and the three-byte separator characters `←`, `↓`, `→`,
`„`, `“`, `”` and `•`. The error carries a `code` (a `LexicalErrorCode`), a
`message`, and the byte `position` where that is known.

The lower-level helpers are also public. `decode_char(data, index)` returns
the raw bytes of one character packed big-endian into an integer, together
with its size. `is_interruption(char, size)` tells whether such a character
ends a word.

To lex a file from the command line (or standard input, if no file is given)
and print every word along with its keyword details:

```
bebopc-lex path/to/source.bb
```

On a lexical error it prints `ERROR[<code>]: <message>` and exits with
status 1.

## Console

`bebopc.console` offers the following helpers:

- `read_line(stream=None)` returns one line without its newline and raises
  `EOFError` when the input is exhausted.
- `write(text, stream=None)` writes the text as it is and flushes.
- `write_line(text, stream=None)` writes the text followed by a newline.

Each one defaults to standard input or standard output.

The following command prompts with `Insert a text: `, echoes the line back,
and then prints the buffer size that the line needed (`Buffer::allmemory`),
its length including the terminator (`Buffer::length`) and the line itself:

```
bebopc-echo
```

## What it does not do

This package stops at recognising keywords. It has no parser, no
type checking and no code generation. The lexer does not produce tokens for
names, numbers, string literals or operators; only keywords reach the token
list.