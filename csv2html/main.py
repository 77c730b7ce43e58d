# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
csv2html driver and command line.
'''

from argparse import ArgumentParser
from errno import ENAMETOOLONG
from sys import exit
from typing import List, Optional, TextIO

from pithy.io import errL

from .constants import encoding, ExitStatus
from .errors import ConversionError, InputNotFound, InputPermission, InvalidPath, OutputError, ReadError
from .logging import warn
from .model import Document
from .parse import parse_file
from .paths import dflt_dst_path, is_dir_mangled, validate_path
from .render import write_html


def main(args:Optional[List[str]]=None) -> None:
  parser = ArgumentParser(prog='csv2html', description='convert a backslash-escaped CSV file to an HTML table.')
  parser.add_argument('input', nargs='?', help='the CSV file to convert.')
  parser.add_argument('output', nargs='?',
    help="the HTML file to write; defaults to the input path with each 'csv' replaced by 'html'.")
  ns = parser.parse_args(args)

  if ns.input is None:
    errL('csv2html error: missing filename.')
    exit(ExitStatus.missing_filename)

  try: convert_path(ns.input, ns.output)
  except ConversionError as e:
    errL(e)
    exit(e.status)


def convert(src:TextIO, dst:TextIO) -> Document:
  'Parse all of `src`, write the HTML table to `dst`, and return the parsed document.'
  doc = parse_file(src)
  write_html(dst, doc)
  return doc


def convert_path(src_path:str, dst_path:Optional[str]=None) -> str:
  '''
  Convert the file at `src_path`, writing to `dst_path` or else to the default output path.
  The whole input is read and parsed before the output is opened.
  Returns the output path.
  '''
  validate_path(src_path)
  doc = read_doc(src_path)

  if dst_path is None:
    dst_path = dflt_dst_path(src_path)
    if dst_path == src_path:
      raise OutputError(src_path, 'cannot derive an output path distinct from the input; specify an output path.')
    if is_dir_mangled(src_path):
      warn(src_path, f'default output path also rewrites a directory name: {dst_path!r}')

  write_doc(dst_path, doc)
  return dst_path


def read_doc(path:str) -> Document:
  try: f = open(path, encoding=encoding)
  except PermissionError as e: raise InputPermission(path, 'permission denied.') from e
  except IsADirectoryError as e: raise InputNotFound(path, 'path is a directory.') from e
  except FileNotFoundError as e: raise InputNotFound(path, 'no such file.') from e
  except OSError as e:
    if e.errno == ENAMETOOLONG: raise InvalidPath(path, 'name is too long.') from e
    raise InputNotFound(path, 'could not open input: ', e.strerror or e) from e
  with f:
    try: return parse_file(f)
    except UnicodeDecodeError as e: raise ReadError(path, f'input is not valid UTF-8: {e.reason} at byte {e.start}.') from e
    except OSError as e: raise ReadError(path, 'read failed: ', e.strerror or e) from e


def write_doc(path:str, doc:Document) -> None:
  try: validate_path(path)
  except InvalidPath as e: raise OutputError(path, *e.msg) from e
  try: f = open(path, 'w', encoding=encoding)
  except OSError as e: raise OutputError(path, 'could not open output: ', e.strerror or e) from e
  try:
    with f: write_html(f, doc)
  except OSError as e: raise OutputError(path, 'write failed: ', e.strerror or e) from e
