# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
csv2html constants.
'''

from enum import IntEnum


# input dialect.
field_sep = ','
quote_char = '"'
escape_char = '\\'
escapable_chars = frozenset({field_sep, quote_char, escape_char})

line_terminators = ('\r\n', '\n', '\r') # longest first.


# HTML entities for cell text, in canonical order.
html_entities = (
  ('<', '&lt;'),
  ('>', '&gt;'),
  ("'", '&apos;'),
  ('&', '&amp;'),
  ('"', '&quot;'),
)

html_prologue = ('<html>', '<body>', '<table border="1">')
html_epilogue = ('</table>', '</body>', '</html>')
row_indent = '  '
cell_indent = '    '


src_ext_text = 'csv'
dst_ext_text = 'html'

encoding = 'utf-8'


class ExitStatus(IntEnum):
  '''
  Process exit statuses for the `csv2html` command.
  1 is left to uncaught exceptions and 2 to argparse usage errors.
  '''
  missing_filename = 3
  invalid_path = 4
  open_input = 5
  input_permission = 6
  read_input = 7
  open_output = 8
