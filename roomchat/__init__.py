"""roomchat - multi-room chat backend with conversations, participants and threaded replies."""

__version__ = "1.0.0"
