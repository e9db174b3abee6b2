"""A terminal Texas Hold'em hand with a seven-card hand evaluator."""

__version__ = "0.1.0"