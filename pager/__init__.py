"""In-memory paginated text document editor.

Packages:
- pager.docs: document model, flat-text parser, txt IO and session buffer
- pager.search: case-insensitive page search
- pager.history: snapshot-based undo/redo stack
- pager.engine: DocumentEngine and the auto-save collaborator
- pager.lang: document language hint
"""
