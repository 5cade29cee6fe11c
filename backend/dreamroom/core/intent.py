"""
Intent Classification

Decides whether a chat message asks for an image edit or is a question for
the consultant. The default classifier is a keyword heuristic; anything with
a classify(text) -> Intent method can replace it.
"""

import re
from enum import Enum
from typing import Protocol


class Intent(str, Enum):
    EDIT = "edit"
    CONVERSATION = "conversation"


# Plain substring matches, so "settle" or "address" also count as edits.
EDIT_VERBS = ("change", "add", "make", "replace", "paint", "set", "remove", "put", "redesign")


class IntentClassifier(Protocol):
    def classify(self, text: str) -> Intent:
        ...


class RegexIntentClassifier:
    """Routes a message to the edit path if it contains any action verb."""

    def __init__(self, verbs=EDIT_VERBS):
        self.pattern = re.compile("|".join(re.escape(v) for v in verbs), re.IGNORECASE)

    def classify(self, text: str) -> Intent:
        if self.pattern.search(text or ""):
            return Intent.EDIT
        return Intent.CONVERSATION
