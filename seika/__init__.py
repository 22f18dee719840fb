"""Game building blocks: containers, events, argument parsing, file and asset loading, and an ECS."""

__version__ = "0.1.0"