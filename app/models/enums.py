from enum import Enum


class UserRole(str, Enum):
    """User roles"""

    ADMIN = "admin"
    EDITOR = "editor"
    STUDENT = "student"


class TestStatus(str, Enum):
    """Publication state of a test"""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class TestDifficulty(str, Enum):
    """Difficulty levels for tests"""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TestCategory(str, Enum):
    ACADEMIC = "Academic"
    GENERAL_TRAINING = "General Training"
    PRACTICE = "Practice"
    MOCK_TEST = "Mock Test"


class Skill(str, Enum):
    """The four IELTS skills, in exam order"""

    READING = "Reading"
    LISTENING = "Listening"
    WRITING = "Writing"
    SPEAKING = "Speaking"


class QuestionType(str, Enum):
    """Question types used in reading and listening sections"""

    MULTIPLE_CHOICE_SINGLE = "multiple_choice_single"
    MULTIPLE_CHOICE_MULTIPLE = "multiple_choice_multiple"
    TRUE_FALSE_NOT_GIVEN = "true_false_not_given"
    FILL_IN_BLANKS = "fill_in_blanks"
    MATCHING_HEADINGS = "matching_headings"
    MATCHING_INFORMATION = "matching_information"
    SUMMARY_COMPLETION = "summary_completion"
    SENTENCE_COMPLETION = "sentence_completion"
    SHORT_ANSWER = "short_answer"


# Hyphenated tags sent by the editor frontend
QUESTION_TYPE_ALIASES = {
    "multiple-choice-single": QuestionType.MULTIPLE_CHOICE_SINGLE,
    "multiple-choice-multiple": QuestionType.MULTIPLE_CHOICE_MULTIPLE,
    "true-false-not-given": QuestionType.TRUE_FALSE_NOT_GIVEN,
    "fill-in-blank": QuestionType.FILL_IN_BLANKS,
    "matching-headings": QuestionType.MATCHING_HEADINGS,
    "matching-information": QuestionType.MATCHING_INFORMATION,
    "summary-completion": QuestionType.SUMMARY_COMPLETION,
    "sentence-completion": QuestionType.SENTENCE_COMPLETION,
    "short-answer": QuestionType.SHORT_ANSWER,
}
