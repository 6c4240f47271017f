"""
CallWatch keyword matching.

Matches call transcripts against enabled keyword rules using
case-insensitive substring containment.
"""

from nlp.keyword_engine import KeywordEngine, match

__all__ = ["KeywordEngine", "match"]
