"""Наборы текстов для тестирования.

Содержит короткий пример с известными частотами, прозу для сквозных
тестов, HTML-текст для проверки извлечения и текст без слов.
"""

SAMPLE_FOX_TEXT = "The Quick brown fox jumps over the lazy dog. The dog barks!"


SAMPLE_PROSE_TEXT = """
Programming is the process of creating instructions for a computer.
Programmers write programs; good programs are tested, and tested programs
are deployed. Developers develop, testers test -- and everybody programs!
""".strip()


SAMPLE_HTML_TEXT = """
<div>
  <p>The <strong>quick</strong> brown fox.</p>
  <p>The lazy dog sleeps.</p>
</div>
""".strip()


SAMPLE_PUNCTUATION_ONLY = "  ... !!! ??? --- ,,, \t\n  "
