"""
Z_utils: Shared helpers.

- Z01_filename_utils: stem/extension splitting for file names
- Z02_text_helpers: capitalization and whitespace helpers
"""
