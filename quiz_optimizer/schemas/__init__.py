from .quiz import QuizRead, QuestionRead, QuestionDifficulty
from .validation import ValidationIssue, ValidationReport

__all__ = [
	"QuizRead",
	"QuestionRead",
	"QuestionDifficulty",
	"ValidationIssue",
	"ValidationReport",
]
