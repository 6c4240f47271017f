"""
Keyword detection engine for CallWatch.

Scans a call transcript for the keywords of each enabled rule using
case-insensitive substring containment and reports, per rule, the
keywords found in the rule's own keyword order.

Containment is not word-bounded: a keyword ``cat`` matches inside
``category``. This is the established matching contract and is kept
as-is.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from cw_common.models import Rule, RuleMatch

logger = structlog.get_logger(__name__)


def match(transcript: str, rules: Iterable[Rule]) -> list[RuleMatch]:
    """Return one :class:`RuleMatch` per rule with at least one keyword hit.

    Args:
        transcript: Call transcript text.
        rules: Enabled rules, in the order results should be reported.
            Disabled rules are skipped.

    Returns:
        Matches in input rule order; empty when nothing matches.
    """
    lowered = transcript.lower()
    if not lowered:
        return []

    matches: list[RuleMatch] = []
    for rule in rules:
        if not rule.enabled:
            continue
        hits = [k for k in rule.keywords if k and k.lower() in lowered]
        if hits:
            matches.append(RuleMatch(rule_id=rule.id, matched_keywords=hits))
    return matches


class KeywordEngine:
    """Runs :func:`match` over a rule set and logs the outcome.

    Holds no rule state between calls; the caller fetches the current
    enabled rules for every transcript.
    """

    def detect(self, transcript: str, rules: Iterable[Rule]) -> list[RuleMatch]:
        """Match *transcript* against *rules*.

        Args:
            transcript: Call transcript text.
            rules: Rules to evaluate, in report order.

        Returns:
            List of :class:`RuleMatch`, one per matching rule.
        """
        rule_list = list(rules)
        matches = match(transcript, rule_list)
        if matches:
            logger.info(
                "keyword_matches_detected",
                rules_evaluated=len(rule_list),
                match_count=len(matches),
            )
        return matches
