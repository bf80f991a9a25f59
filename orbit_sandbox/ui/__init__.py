"""Interactive tkinter shell."""
