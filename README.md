# minilex

minilex splits a command line into shell-style tokens. It handles single and
double quotes and recognises the pipe, logic and redirection operators.

Every token is a `minilex.tokens.Token` with three fields:

- `text`: the token's text.
- `type`: a `TokenType` value.
- `quoted_by`: the quote character (`'` or `"`) that opened and closed the
  word, or `None`.

The `TokenType` values are:

- `ARG`: a plain word.
- `PIPE`: the `|` operator.
- `LOGIC`: the `&&` and `||` operators.
- `FILE_REDIR`: the `<`, `>`, `<<` and `>>` operators.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Interactive use

```
minilex
```

When standard input is a terminal, this shows a `lex> ` prompt. Each line
you type is tokenized, the tokens are unquoted, and each token is printed on
its own line with its type:

```
lex> echo "hello world" | grep -v x >> out.txt
[echo] (ARG)
[hello world] (ARG)
[|] (PIPE)
[grep] (ARG)
[-v] (ARG)
[x] (ARG)
[>>] (FILE_REDIR)
[out.txt] (ARG)
```

Press Ctrl-D (end of input) to quit. When input is piped in, the command
reads line by line and shows no prompt.

If a line holds an operator that has no meaning, such as a lone `&`, an
error message is written to standard error and the command goes on to the
next line.

## Library use

```python
from minilex.scanner import tokenize
from minilex.unquote import remove_quotes
from minilex.cli import format_token

tokens = tokenize('cat < in.txt && echo "a \\"b\\""')
remove_quotes(tokens)
for token in tokens:
    print(format_token(token))
```

This prints:

```
[cat] (ARG)
[<] (FILE_REDIR)
[in.txt] (ARG)
[&&] (LOGIC)
[echo] (ARG)
[a "b"] (ARG)
```

### Scanning: `minilex.scanner`

- `tokenize(text)` returns a list of tokens. Quotes are removed while the
  text is scanned:
  - Text inside single or double quotes stays in one word.
  - Inside double quotes, `\"` stands for a literal double quote.
  - A quote with no closing partner is kept as a literal character.
  - A quoted run that becomes empty, as in `""`, gives an empty `ARG` token.

  `tokenize` raises `ValueError` for an operator that has no meaning, such as
  a lone `&`.
- `read_operator(text, i)` returns `(operator, kind, next_index)`, or `None`
  when no operator character stands at `i`.
- `skip_spaces(text, i)` returns the index of the next character that is
  not whitespace.
- `is_reserved(c)` tells you whether `c` can start an operator.

### Unquoting: `minilex.unquote`

- `remove_quotes(tokens)` works in place. It strips the outer quotes of a
  token whose text is still wrapped in the quote recorded in `quoted_by`.
- `is_wrapped(text, quote)` checks whether `text` opens with `quote` and its
  only other `quote` character is the last one.

### Retokenizing: `minilex.retokenize`

- `split_outside_quotes(text)` splits a string on whitespace that lies
  outside quotes. It drops the quotes and leaves out empty pieces.
- `retokenize(tokens, index, token_type, start)` splits the text of
  `tokens[index]` again, starting at position `start`:
  - The token takes the first piece and `token_type`.
  - The remaining pieces are inserted after it as new tokens.
  - It returns the number of pieces, or 0 when there were none; in that case
    the token is not changed.
  - It raises `ValueError` if `start` lies outside the token's text.

### Helper modules

- `minilex.charclass`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`) and case conversion
  (`to_lower`, `to_upper`). These accept a one-character string or an
  integer code.
- `minilex.strutil`: string helpers:
  - numeric conversion: `atoi`, `itoa`
  - splitting and joining: `split`, `strjoin`
  - searching: `strchr`, `strrchr`, `strnstr`, `strncmp`
  - per-character functions: `striteri`, `strmapi`
  - trimming and slicing: `strtrim`, `substr`
  - bounded copies: `strlcpy`, `strlcat`, which return the resulting text
    together with the length needed to copy everything
- `minilex.memutil`: byte-buffer helpers on `bytes` and `bytearray`
  (`bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`).
- `minilex.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. They
  write to a text stream, which is standard output by default.
- `minilex.linkedlist`: `LinkedList` and `Node`, a singly linked list that
  supports `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`,
  `len()` and iteration.

## What it does not do

minilex only breaks text into tokens. It does not:

- run commands
- build a command tree from the tokens
- expand variables or wildcards
- read here-documents

A backslash outside double quotes is an ordinary character.

## Running the tests

```
pytest
```