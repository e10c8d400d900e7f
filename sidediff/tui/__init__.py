"""
TUI diff viewer.

A Textual-based terminal UI showing a formatted unified diff in a
scrollable, resizable pane.

Usage:
    git diff | python -m sidediff.main

Components:
    - DiffViewerApp: Main application class
    - DiffScreen: Loading indicator, then the diff pane
    - DiffPane: Scrollable pane widget (create_pane / resize_pane)
    - next_state: Session state machine (Initializing -> Ready)
"""
