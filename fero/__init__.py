"""Cooperative tasklet scheduling with bounded message queues, plus two demos."""

__version__ = "0.1.0"