# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import re
from io import StringIO

from csv2html.parse import parse_text
from csv2html.render import escape, render_html, write_html


def tags(html:str):
  return re.findall(r'</?\w+', html)


def test_escape_entities():
  assert escape('<') == '&lt;'
  assert escape('>') == '&gt;'
  assert escape("'") == '&apos;'
  assert escape('&') == '&amp;'
  assert escape('"') == '&quot;'


def test_escape_is_not_reapplied():
  assert escape('<b>&amp;</b>') == '&lt;b&gt;&amp;amp;&lt;/b&gt;'
  assert escape('a < b & "c"') == 'a &lt; b &amp; &quot;c&quot;'


def test_escape_identity():
  for text in ['', 'plain text', 'comma, semicolon; backslash \\', 'ünïcödé ✓ 日本']:
    assert escape(text) == text


def test_empty_document():
  assert render_html([]) == '<html>\n<body>\n<table border="1">\n</table>\n</body>\n</html>\n'


def test_empty_row():
  assert render_html([[]]) == '<html>\n<body>\n<table border="1">\n  <tr>\n  </tr>\n</table>\n</body>\n</html>\n'


def test_layout():
  assert render_html([['a', '<b>']]).splitlines() == [
    '<html>',
    '<body>',
    '<table border="1">',
    '  <tr>',
    '    <td>a</td>',
    '    <td>&lt;b&gt;</td>',
    '  </tr>',
    '</table>',
    '</body>',
    '</html>',
  ]


def test_end_to_end():
  html = render_html(parse_text('name,age\nAlice,30\n'))
  assert tags(html) == [
    '<html', '<body', '<table',
    '<tr', '<td', '</td', '<td', '</td', '</tr',
    '<tr', '<td', '</td', '<td', '</td', '</tr',
    '</table', '</body', '</html',
  ]
  assert re.findall(r'<td>(.*?)</td>', html) == ['name', 'age', 'Alice', '30']


def test_ragged_rows():
  html = render_html([['a', 'b', 'c'], ['d']])
  rows = re.findall(r'<tr>(.*?)</tr>', html, flags=re.S)
  assert [r.count('<td>') for r in rows] == [3, 1]


def test_write_html_matches_render_html():
  doc = [['x', 'y'], [], ['&']]
  s = StringIO()
  write_html(s, doc)
  assert s.getvalue() == render_html(doc)


def test_write_html_accepts_iterator():
  assert render_html(iter([['a']])) == render_html([['a']])
