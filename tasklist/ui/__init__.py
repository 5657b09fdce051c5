"""Task List user interface - Textual application and widgets."""
