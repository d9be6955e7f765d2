"""
Feedback Schema Validator

Checks the JSON object returned by the provider against a declarative
description of the feedback schema before anything is persisted. The schema is
data (FEEDBACK_SCHEMA); validate_against_schema walks it and collects every
violation instead of stopping at the first one.

Rules:
- every top-level field must be present; all missing fields are reported together
- present fields must have the expected JSON type
- categoryScores must be an array of exactly five items
- each category needs a non-empty name, a score key (any value) and a non-empty comment

Dependencies:
- dataclasses: For the schema description types.
"""
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
from app.errors.exceptions import SchemaError

NUMBER = (int, float)

@dataclass(frozen=True)
class FieldRule:
    name: str
    types: Tuple[type, ...] = ()
    non_empty: bool = False
    length: Optional[int] = None
    items: Optional["ObjectSchema"] = None
    item_label: Optional[str] = None
    message: Optional[str] = None

@dataclass(frozen=True)
class ObjectSchema:
    fields: Tuple[FieldRule, ...]

    @property
    def required(self) -> List[str]:
        return [rule.name for rule in self.fields]


CATEGORY_SCHEMA = ObjectSchema(fields=(
    FieldRule("name", types=(str,), non_empty=True),
    FieldRule("score"),
    FieldRule("comment", types=(str,), non_empty=True),
))

FEEDBACK_SCHEMA = ObjectSchema(fields=(
    FieldRule("totalScore", types=NUMBER),
    FieldRule(
        "categoryScores",
        types=(list,),
        length=5,
        items=CATEGORY_SCHEMA,
        item_label="Category",
        message="categoryScores must be an array with 5 items",
    ),
    FieldRule("strengths", types=(list,)),
    FieldRule("areasForImprovement", types=(list,)),
    FieldRule("finalAssessment", types=(str,)),
))

def _type_matches(value: Any, types: Tuple[type, ...]) -> bool:
    if not types:
        return True
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)

def _type_label(types: Tuple[type, ...]) -> str:
    if types == NUMBER:
        return "a number"
    if types == (list,):
        return "an array"
    if types == (str,):
        return "a string"
    return " or ".join(t.__name__ for t in types)

def _rule_violation(rule: FieldRule, value: Any) -> Optional[str]:
    if not _type_matches(value, rule.types):
        return rule.message or f"{rule.name} must be {_type_label(rule.types)}"
    if rule.length is not None and len(value) != rule.length:
        return rule.message or f"{rule.name} must have {rule.length} items"
    if rule.non_empty and not value:
        return rule.message or f"{rule.name} must not be empty"
    return None

def validate_against_schema(obj: Any, schema: ObjectSchema) -> List[str]:
    """
    Collect the violations of obj against schema.

    Args:
        obj: Decoded JSON value
        schema: Declarative schema to check against

    Returns:
        List[str]: Human readable violations, empty when obj is valid
    """
    if not isinstance(obj, dict):
        return ["expected a JSON object"]

    violations = []
    missing = [name for name in schema.required if name not in obj]
    if missing:
        violations.append(f"Missing {', '.join(missing)}")

    for rule in schema.fields:
        if rule.name not in obj:
            continue
        value = obj[rule.name]
        problem = _rule_violation(rule, value)
        if problem:
            violations.append(problem)
            continue
        if rule.items is not None:
            for index, item in enumerate(value):
                if validate_against_schema(item, rule.items):
                    violations.append(f"{rule.item_label} {index + 1} is missing required properties")

    return violations

def validate_feedback(obj: Any) -> dict:
    """
    Validate a parsed provider answer against FEEDBACK_SCHEMA.

    Returns:
        dict: The same object, once it is known to be complete

    Raises:
        SchemaError: Listing every violation found
    """
    violations = validate_against_schema(obj, FEEDBACK_SCHEMA)
    if violations:
        raise SchemaError(violations)
    return obj
