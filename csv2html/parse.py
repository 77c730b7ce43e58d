# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tokenizer for the backslash-escaped CSV dialect.

Each line is one record; there are no multi-line cells.
Within a line:
* a double quote toggles quoted mode and is dropped; commas inside quotes are literal.
* a backslash followed by a comma, double quote, or backslash produces that character literally,
  inside or outside of quotes. Any other backslash is kept as is.
* an unquoted comma ends the current cell.
At the end of the line the pending cell is appended only if it is non-empty;
thus `a,b,` yields two cells, and an empty line yields an empty row.
The tokenizer never fails: unterminated quotes and stray backslashes are accepted as is.
'''

from typing import Iterable, List, TextIO

from .constants import escapable_chars, escape_char, field_sep, line_terminators, quote_char
from .model import Cell, Document, Row


def parse_line(line:str) -> Row:
  'Tokenize a single record. `line` must not contain a line terminator.'
  row:Row = []
  buffer:List[str] = []
  in_quotes = False
  i = 0
  end = len(line)
  while i < end:
    c = line[i]
    if c == quote_char:
      in_quotes = not in_quotes
    elif c == escape_char:
      next_i = i + 1
      if next_i < end and line[next_i] in escapable_chars:
        buffer.append(line[next_i])
        i = next_i
      else: # unrecognized escape, or a backslash at the end of the line.
        buffer.append(c)
    elif c == field_sep and not in_quotes:
      row.append(_cell(buffer))
      buffer = []
    else:
      buffer.append(c)
    i += 1
  if buffer: # a trailing empty cell is dropped.
    row.append(_cell(buffer))
  return row


def _cell(buffer:List[str]) -> Cell:
  return ''.join(buffer)


def strip_terminator(line:str) -> str:
  'Remove a single trailing line terminator, if present.'
  for t in line_terminators:
    if line.endswith(t): return line[:-len(t)]
  return line


def parse_lines(lines:Iterable[str]) -> Document:
  '''
  Tokenize each line into a row.
  Lines may carry their terminator, as yielded by iterating over a text file.
  '''
  return [parse_line(strip_terminator(line)) for line in lines]


def parse_text(text:str) -> Document:
  '''
  Tokenize a complete text.
  Only '\\n', '\\r\\n' and '\\r' separate records;
  unlike `str.splitlines`, other Unicode line boundaries are cell content.
  A final terminator does not produce an additional empty row.
  '''
  if not text: return []
  lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
  if lines[-1] == '': lines.pop()
  return [parse_line(line) for line in lines]


def parse_file(f:TextIO) -> Document:
  '''
  Read and tokenize every line of an open text file.
  The file should be opened with universal newlines (the default) or with `newline=''`;
  either way each record is terminated by one of the recognized line terminators.
  '''
  return parse_lines(f)
