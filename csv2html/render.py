# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Render a parsed document as an HTML table.
'''

from io import StringIO
from typing import Iterable, TextIO

from .constants import cell_indent, html_entities, html_epilogue, html_prologue, row_indent
from .model import Row


_entity_table = str.maketrans(dict(html_entities))

def escape(text:str) -> str:
  '''
  Replace the characters `<`, `>`, `'`, `&` and `"` with their entities.
  The substitution is a single pass, so the ampersand of an introduced entity is never escaped again;
  `html.escape` is not used because it writes the apostrophe as a numeric reference.
  '''
  return text.translate(_entity_table)


def write_html(f:TextIO, doc:Iterable[Row]) -> None:
  'Write `doc` to `f` as a complete HTML document containing a single table.'
  for tag in html_prologue:
    print(tag, file=f)
  for row in doc:
    print(row_indent, '<tr>', sep='', file=f)
    for cell in row:
      print(cell_indent, '<td>', escape(cell), '</td>', sep='', file=f)
    print(row_indent, '</tr>', sep='', file=f)
  for tag in html_epilogue:
    print(tag, file=f)


def render_html(doc:Iterable[Row]) -> str:
  s = StringIO()
  write_html(s, doc)
  return s.getvalue()
