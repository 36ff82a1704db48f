"""
main.py — Run your Hack Man bot
===============================

This is the entry point the engine starts. Point it at your AI
implementation and run:

    python main.py

The runner will:
  1. Read engine lines from stdin
  2. Keep the game state up to date
  3. Call YOUR AI functions on every action request
  4. Write your answers to stdout

Logs go to stderr, so they never mix with your answers.
"""

from hackman_bot import BotRunner
from my_ai import SnippetChaserAI

# ── Configuration ──
config = {
    # JSON log records, handy after a tournament run
    "log_file": "hackman_bot.log",
    "log_level": "INFO",

    # Stop on the first malformed engine line instead of skipping it
    "strict": False,

    # One stderr line per received command and sent answer
    "protocol_trace": False,
}

# ── Create your AI and run ──
runner = BotRunner(config=config, ai=SnippetChaserAI())
runner.run()
