"""
Fill in a stable content shape for every question type
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from ..models.enums import QuestionType, QUESTION_TYPE_ALIASES

# (field, legacy aliases, default). The first field is the primary one:
# content is only rebuilt when it is missing.
ContentField = Tuple[str, Tuple[str, ...], Any]

CONTENT_SHAPES: Dict[QuestionType, List[ContentField]] = {
    QuestionType.MULTIPLE_CHOICE_SINGLE: [
        ("question", ("statement",), ""),
        ("options", (), []),
        ("correctAnswer", (), 0),
        ("explanation", (), ""),
    ],
    QuestionType.MULTIPLE_CHOICE_MULTIPLE: [
        ("question", ("statement",), ""),
        ("options", (), []),
        ("numberOfAnswers", (), 1),
        ("correctAnswers", (), []),
        ("explanation", (), ""),
    ],
    QuestionType.TRUE_FALSE_NOT_GIVEN: [
        ("statement", ("question",), ""),
        ("answer", (), "Not Given"),
        ("explanation", (), ""),
    ],
    QuestionType.FILL_IN_BLANKS: [
        ("sentence", ("question",), ""),
        ("correctAnswers", (), []),
        ("maxWords", (), 1),
        ("explanation", (), ""),
    ],
    QuestionType.SENTENCE_COMPLETION: [
        ("sentence", ("question",), ""),
        ("correctAnswers", (), []),
        ("maxWords", (), 3),
        ("explanation", (), ""),
    ],
    QuestionType.SHORT_ANSWER: [
        ("question", ("statement",), ""),
        ("correctAnswers", (), []),
        ("maxWords", (), 3),
        ("explanation", (), ""),
    ],
    QuestionType.MATCHING_HEADINGS: [
        ("headings", (), []),
        ("paragraphs", (), []),
        ("correctMatching", (), []),
        ("explanation", (), ""),
    ],
    QuestionType.MATCHING_INFORMATION: [
        ("items", (), []),
        ("options", (), []),
        ("correctMatching", (), []),
        ("explanation", (), ""),
    ],
    QuestionType.SUMMARY_COMPLETION: [
        ("summary", ("text",), ""),
        ("blanks", (), []),
        ("wordBank", (), []),
        ("explanation", (), ""),
    ],
}


def resolve_question_type(type_tag: Any) -> Optional[QuestionType]:
    """Map a raw type tag (underscore or hyphen form) to a QuestionType"""
    if isinstance(type_tag, QuestionType):
        return type_tag
    if not isinstance(type_tag, str):
        return None
    if type_tag in QUESTION_TYPE_ALIASES:
        return QUESTION_TYPE_ALIASES[type_tag]
    try:
        return QuestionType(type_tag)
    except ValueError:
        return None


def _pick(content: Dict[str, Any], field: str, aliases: Tuple[str, ...], default: Any):
    for key in (field, *aliases):
        value = content.get(key)
        if value:
            return copy.deepcopy(value)
    return copy.deepcopy(default)


def normalize_question(question: Any) -> Any:
    """
    Return ``question`` with a content object shaped for its type.

    Unknown types and questions without content come back unchanged.
    """
    if not isinstance(question, dict) or not isinstance(question.get("content"), dict):
        return question

    question_type = resolve_question_type(question.get("type"))
    if question_type is None:
        return question

    normalized = dict(question)
    normalized["type"] = question_type.value

    shape = CONTENT_SHAPES[question_type]
    content = question["content"]
    primary_field = shape[0][0]
    if not content.get(primary_field):
        normalized["content"] = {
            field: _pick(content, field, aliases, default)
            for field, aliases, default in shape
        }

    return normalized


def normalize_questions(questions: Any) -> List[Any]:
    if not isinstance(questions, list):
        return []
    return [normalize_question(question) for question in questions]
