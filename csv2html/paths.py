# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
csv2html path functions.
'''

from pithy.path import path_dir

from .constants import dst_ext_text, src_ext_text
from .errors import InvalidPath


def dflt_dst_path(src_path:str) -> str:
  '''
  Return the default output path for `src_path`.
  Every occurrence of 'csv' is replaced with 'html', wherever it appears in the path:
  `data/foo.csv` becomes `data/foo.html`, but `csv-data/foo.txt` becomes `html-data/foo.txt`.
  '''
  return src_path.replace(src_ext_text, dst_ext_text)


def is_dir_mangled(src_path:str) -> bool:
  'True if `dflt_dst_path` would rewrite a directory component of `src_path`.'
  return src_ext_text in path_dir(src_path)


def validate_path(path:str) -> None:
  'Raise `InvalidPath` if `path` cannot name a file.'
  if not path: raise InvalidPath(path, 'path is empty.')
  if '\0' in path: raise InvalidPath(path, 'path contains a NUL character.')
