"""The 2048 sliding-tile puzzle: board logic, a leaderboard client and a Tk window."""

__version__ = "0.1.0"