"""
J_export: Filesystem renames and the undo journal.

Provides:
- RenameProposal / RenameJournal models
- plan_renames / apply_renames for a directory of files
- write_journal / load_journal / undo_renames for restoring original names
"""
