"""Newsletter title generator: a FastAPI handler over a chat-completion API plus a small client."""

__version__ = "0.1.0"
