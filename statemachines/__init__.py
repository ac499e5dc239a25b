"""State-pattern examples: a light switch, toggling contexts, a department store item and a job application."""

__version__ = "1.0.0"