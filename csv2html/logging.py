# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any

from pithy.io import errL


def warn(path:str, *items:Any) -> None:
  errL(f'csv2html WARNING: {path}: ', *items)

def error_msg(path:str, *msg:Any) -> str:
  return f'csv2html error: {path}: ' + ''.join(str(m) for m in msg)
