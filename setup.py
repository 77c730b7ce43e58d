# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.


import sys
if sys.version_info < (3, 8): exit('error: csv2html requires Python3.8 or later. Make sure to install with `pip3` or `pip3.X`.')

from setuptools import setup


setup(
  name='csv2html',
  version='0.1.0',
  description='Convert backslash-escaped CSV files to HTML tables.',
  license='CC0',
  python_requires='>=3.8',
  packages=['csv2html'],
  install_requires=['pithy'],
  extras_require={'test': ['pytest']},
  entry_points = {'console_scripts': [
    'csv2html=csv2html.main:main',
  ]},
)
