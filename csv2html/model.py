# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Types shared by the parser and the renderer.
A document is an ordered list of rows; a row is an ordered list of cell strings.
Rows are not required to have the same length.
'''

from typing import List


Cell = str
Row = List[Cell]
Document = List[Row]
