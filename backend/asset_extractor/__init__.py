"""
Website asset extractor.

Fetches a page and pulls out reusable buttons and layout templates
(hero, feature card, navigation, footer) using class-name and
structural heuristics.
"""

__version__ = "0.1.0"
