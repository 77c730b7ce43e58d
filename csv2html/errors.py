# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Conversion errors.
Parsing never fails; every error here comes from resolving, reading, or writing a file.
Each class carries the exit status that the command reports for it.
'''

from typing import Any

from .constants import ExitStatus
from .logging import error_msg


class ConversionError(Exception):
  status:ExitStatus # each subclass names its own.

  def __init__(self, path:str, *msg:Any) -> None:
    super().__init__(path, *msg)
    self.path = path
    self.msg = msg

  def __str__(self) -> str:
    return error_msg(*self.args)


class InvalidPath(ConversionError):
  status = ExitStatus.invalid_path

  def __str__(self) -> str:
    return f'csv2html error: invalid path: {self.path!r}; ' + ''.join(str(m) for m in self.msg)


class InputNotFound(ConversionError):
  status = ExitStatus.open_input

class InputPermission(ConversionError):
  status = ExitStatus.input_permission

class ReadError(ConversionError):
  status = ExitStatus.read_input

class OutputError(ConversionError):
  status = ExitStatus.open_output
