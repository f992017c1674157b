from enum import Enum

class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

class SkipReason(str, Enum):
    NO_CATEGORY = "no_category"            # CATEGORY blank
    NO_QUESTION = "no_question"            # KEY EVALUATION QUESTIONS blank
    NO_CATEGORY_ID = "no_category_id"      # no leading "N." in CATEGORY
    NO_VALID_OPTIONS = "no_valid_options"  # nothing left in [1, 4] after normalizing

class QuestionStatus(str, Enum):
    COMPLETED = "completed"
    NEEDS_REVIEW = "needs_review"
    NO_SCORE = "no_score"

class AIConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
