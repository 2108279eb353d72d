"""
Query-string encoding rules for Alertmanager list endpoints. Alertmanager applies its own defaults when a parameter is absent, so each flag is only sent when it diverges from that default.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class QueryRule:
    field: str
    condition: Callable[[Any], bool]
    # None forwards the value verbatim
    literal: Optional[str] = None

    def encode(self, value: Any) -> Optional[Tuple[str, str]]:
        if not self.condition(value):
            return None
        return (self.field, self.literal if self.literal is not None else str(value))


def _present(value: Any) -> bool:
    return bool(value)


def _is_true(value: Any) -> bool:
    return value is True


def _is_false(value: Any) -> bool:
    return value is False


FILTER_RULE = QueryRule("filter", _present)
SILENCED_RULE = QueryRule("silenced", _is_true, "true")
INHIBITED_RULE = QueryRule("inhibited", _is_true, "true")
ACTIVE_RULE = QueryRule("active", _is_false, "false")

ALERT_QUERY_RULES: Tuple[QueryRule, ...] = (FILTER_RULE, SILENCED_RULE, INHIBITED_RULE, ACTIVE_RULE)
ALERT_GROUP_QUERY_RULES: Tuple[QueryRule, ...] = (ACTIVE_RULE, SILENCED_RULE, INHIBITED_RULE)
SILENCE_QUERY_RULES: Tuple[QueryRule, ...] = (FILTER_RULE,)


def encode_query(rules: Sequence[QueryRule], values: Mapping[str, Any]) -> List[Tuple[str, str]]:
    params: List[Tuple[str, str]] = []
    for rule in rules:
        fragment = rule.encode(values.get(rule.field))
        if fragment is not None:
            params.append(fragment)
    return params
