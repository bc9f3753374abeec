# document_renamer/B_parsing/__init__.py
"""
Field extraction layer of the renamer pipeline.

Each stage consumes the remainder text produced by the previous one.

Key Components:
    - B01_date_extractor: Prioritized date grammars, century policy, YYYY.MM.DD output
    - B02_physician_normalizer: Title and credential physician patterns
    - B03_document_classifier: Leading-letter check plus the prioritized rule table
"""
