# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Convert CSV files written in a backslash-escaped dialect to HTML tables.
'''

from .errors import ConversionError, InputNotFound, InputPermission, InvalidPath, OutputError, ReadError
from .main import convert, convert_path
from .model import Cell, Document, Row
from .parse import parse_file, parse_line, parse_lines, parse_text
from .paths import dflt_dst_path
from .render import escape, render_html, write_html


# module exports.
__all__ = [
  'Cell',
  'ConversionError',
  'Document',
  'InputNotFound',
  'InputPermission',
  'InvalidPath',
  'OutputError',
  'ReadError',
  'Row',
  'convert',
  'convert_path',
  'dflt_dst_path',
  'escape',
  'parse_file',
  'parse_line',
  'parse_lines',
  'parse_text',
  'render_html',
  'write_html',
]
