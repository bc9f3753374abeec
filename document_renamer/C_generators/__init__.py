# document_renamer/C_generators/__init__.py
"""
Output generation for the renamer pipeline.

Key Components:
    - C01_description_builder: Type-aware description fragment
    - C02_assembler: "date - type - description" assembly and physician placement
"""
