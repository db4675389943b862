# client_parser/rules.py

from typing import Any, Callable, NamedTuple, Optional, Sequence, Tuple
import re


class Rule(NamedTuple):
    """One entry of an ordered rule chain"""

    name: str
    match: Callable[[str], Optional[re.Match]]
    build: Callable[[re.Match, str], Any]


def first_match(rules: Sequence[Rule], user_agent: str) -> Tuple[Optional[Rule], Any]:
    """
    Evaluate rules in order - first match wins.
    Returns (rule, built partial) or (None, None) if nothing fired.
    """
    for rule in rules:
        match = rule.match(user_agent)
        if match:
            return rule, rule.build(match, user_agent)

    return None, None
