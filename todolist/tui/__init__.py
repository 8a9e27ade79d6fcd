"""Terminal user interface for todolist, built on Textual."""
