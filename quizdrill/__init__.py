"""Interactive multiple-choice aptitude quiz: question bank, quiz sessions and the terminal command."""

__version__ = "0.1.0"
__all__ = ["questions", "session", "cli"]