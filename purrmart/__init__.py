"""Containers, input readers and menu art for the Purrmart console shop game."""

__version__ = "0.1.0"