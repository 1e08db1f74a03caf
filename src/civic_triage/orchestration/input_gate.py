"""
Input gate: decides whether a submission is worth a provider call.

Submissions with nothing to classify, or description-only submissions that
are too short or contain no real words, go straight to the unclassifiable
result without any network call.
"""

from dataclasses import dataclass
from typing import Optional

from civic_triage.llm.text_utils import has_alpha_run
from civic_triage.models.classification import ClassificationRequest


NO_INPUT = "no_input"
DESCRIPTION_TOO_SHORT = "description_too_short"
DESCRIPTION_GIBBERISH = "description_gibberish"


@dataclass(frozen=True)
class InputVerdict:
    accepted: bool
    reason: Optional[str] = None


class InputGate:
    """
    Cheap local checks run before any provider call.

    Description checks only apply when there is no image: a photo with a
    one-word caption is still worth sending to a vision model.
    """

    def __init__(self, min_description_length: int = 10, min_alpha_run: int = 3):
        self.min_description_length = min_description_length
        self.min_alpha_run = min_alpha_run

    def check(self, request: ClassificationRequest) -> InputVerdict:
        if not request.has_input:
            return InputVerdict(accepted=False, reason=NO_INPUT)

        if request.has_image:
            return InputVerdict(accepted=True)

        description = (request.description or "").strip()
        if len(description) < self.min_description_length:
            return InputVerdict(accepted=False, reason=DESCRIPTION_TOO_SHORT)
        if not has_alpha_run(description, self.min_alpha_run):
            return InputVerdict(accepted=False, reason=DESCRIPTION_GIBBERISH)

        return InputVerdict(accepted=True)
