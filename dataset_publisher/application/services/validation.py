"""Validation rules for wizard step submissions."""

import calendar
from dataclasses import dataclass, field
from typing import Callable

from pydantic import HttpUrl, TypeAdapter, ValidationError

from dataset_publisher.application.services.step_flow import parse_step
from dataset_publisher.domain.entities import FieldError
from dataset_publisher.domain.enums import Frequency, Licence, MessageKind, StepId
from dataset_publisher.domain.errors import FrequencyNotSetError, InvalidStepError
from dataset_publisher.domain.types import JsonValue, StepInput

MIN_YEAR = 1000
MAX_YEAR = 9999

_HTTP_URL = TypeAdapter(HttpUrl)


@dataclass(frozen=True)
class ValidationContext:
    """Prior answers and reference data a step is validated against."""

    frequency: Frequency | None = None
    topic_ids: frozenset[str] = frozenset()


@dataclass
class ValidationReport:
    """Ordered field errors and the cleaned values of a submission."""

    errors: list[FieldError] = field(default_factory=list)
    cleaned: StepInput = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Whether the submission passed every rule."""
        return not self.errors


Parser = Callable[[JsonValue, StepInput, ValidationContext], JsonValue]


@dataclass(frozen=True)
class FieldRule:
    """Rule for one field.

    The parser returns the cleaned value or raises ValueError. Rules without a
    message kind are optional and never fail.
    """

    field: str
    parse: Parser
    message_kind: MessageKind | None = None


# ============================================================================
# Parsers
# ============================================================================


def _as_int(value: JsonValue) -> int:
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValueError(f"not a whole number: {value!r}")


def _in_range(value: JsonValue, low: int, high: int) -> int:
    number = _as_int(value)
    if not low <= number <= high:
        raise ValueError(f"{number} outside {low}..{high}")
    return number


def _non_blank(value: JsonValue, _input: StepInput, _context: ValidationContext) -> str:
    if value is None or not str(value).strip():
        raise ValueError("blank")
    return str(value).strip()


def _optional_text(value: JsonValue, _input: StepInput, _context: ValidationContext) -> str | None:
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _url(value: JsonValue, step_input: StepInput, context: ValidationContext) -> str:
    url = _non_blank(value, step_input, context)
    if " " in url:
        raise ValueError(f"malformed url: {url}")
    try:
        _HTTP_URL.validate_python(url)
    except ValidationError as e:
        raise ValueError(f"malformed url: {url}") from e
    return url


def _topic(value: JsonValue, step_input: StepInput, context: ValidationContext) -> str:
    topic_id = _non_blank(value, step_input, context)
    if topic_id not in context.topic_ids:
        raise ValueError(f"unknown topic: {topic_id}")
    return topic_id


def _licence(value: JsonValue, _input: StepInput, _context: ValidationContext) -> str:
    return Licence(value).value


def _frequency(value: JsonValue, _input: StepInput, _context: ValidationContext) -> Frequency:
    return Frequency(value)


def _year(value: JsonValue, _input: StepInput, _context: ValidationContext) -> int:
    return _in_range(value, MIN_YEAR, MAX_YEAR)


def _month(value: JsonValue, _input: StepInput, _context: ValidationContext) -> int:
    return _in_range(value, 1, 12)


def _quarter(value: JsonValue, _input: StepInput, _context: ValidationContext) -> int:
    return _in_range(value, 1, 4)


def _period_year(value: JsonValue, step_input: StepInput, context: ValidationContext) -> int:
    # Financial-year periods and fourth quarters end in the following calendar year
    year = _year(value, step_input, context)
    if context.frequency == Frequency.FINANCIAL_YEAR or _is_fourth_quarter(step_input, context):
        return _in_range(year, MIN_YEAR, MAX_YEAR - 1)
    return year


def _is_fourth_quarter(step_input: StepInput, context: ValidationContext) -> bool:
    if context.frequency != Frequency.QUARTERLY:
        return False
    try:
        return _quarter(step_input.get("quarter"), step_input, context) == 4
    except ValueError:
        return False


def _day(value: JsonValue, step_input: StepInput, context: ValidationContext) -> int:
    try:
        month = _month(step_input.get("month"), step_input, context)
        year = _year(step_input.get("year"), step_input, context)
    except ValueError:
        # Month or year is reported on its own; check the day in isolation
        return _in_range(value, 1, 31)
    return _in_range(value, 1, calendar.monthrange(year, month)[1])


# ============================================================================
# Rule tables
# ============================================================================

_LINK_RULES = (
    FieldRule("url", _url, MessageKind.INVALID_URL),
    FieldRule("name", _non_blank, MessageKind.INVALID_NAME),
)

_DAY = FieldRule("day", _day, MessageKind.INVALID_DATE)
_MONTH = FieldRule("month", _month, MessageKind.INVALID_MONTH)
_QUARTER = FieldRule("quarter", _quarter, MessageKind.INVALID_QUARTER)
_YEAR = FieldRule("year", _year, MessageKind.INVALID_YEAR)
_PERIOD_END_YEAR = FieldRule("year", _period_year, MessageKind.INVALID_YEAR)

PERIOD_RULES: dict[Frequency, tuple[FieldRule, ...]] = {
    Frequency.NEVER: (),
    Frequency.DAILY: (_DAY, _MONTH, _YEAR),
    Frequency.WEEKLY: (_DAY, _MONTH, _YEAR),
    Frequency.MONTHLY: (_MONTH, _YEAR),
    Frequency.QUARTERLY: (_QUARTER, _PERIOD_END_YEAR),
    Frequency.ANNUALLY: (_YEAR,),
    Frequency.FINANCIAL_YEAR: (_PERIOD_END_YEAR,),
}

_missing_period_rules = set(Frequency) - set(PERIOD_RULES)
if _missing_period_rules:
    raise RuntimeError(f"No period rules for frequencies: {sorted(f.value for f in _missing_period_rules)}")

STEP_RULES: dict[StepId, tuple[FieldRule, ...]] = {
    StepId.NEW: (
        FieldRule("title", _non_blank, MessageKind.INVALID_TITLE),
        FieldRule("summary", _non_blank, MessageKind.MISSING_SUMMARY),
        FieldRule("description", _optional_text),
    ),
    StepId.TOPIC: (FieldRule("topic_id", _topic, MessageKind.MISSING_TOPIC),),
    StepId.LICENCE: (FieldRule("licence_code", _licence, MessageKind.MISSING_LICENCE),),
    StepId.LOCATION: (
        FieldRule("location1", _optional_text),
        FieldRule("location2", _optional_text),
        FieldRule("location3", _optional_text),
    ),
    StepId.FREQUENCY: (FieldRule("frequency", _frequency, MessageKind.MISSING_FREQUENCY),),
    StepId.DATAFILES: _LINK_RULES,
    StepId.DATAFILES_UNDATED: _LINK_RULES,
    StepId.DOCS: _LINK_RULES,
}

DATED_STEPS = frozenset({StepId.DATAFILES, StepId.DATAFILES_UNDATED})


def rules_for(step: StepId, context: ValidationContext) -> tuple[FieldRule, ...]:
    """Get the rules for a step given the prior answers in context."""
    step = parse_step(step)
    if step not in STEP_RULES:
        raise InvalidStepError(f"Step '{step.value}' does not accept submissions")

    rules = STEP_RULES[step]
    if step in DATED_STEPS:
        if context.frequency is None:
            raise FrequencyNotSetError("Choose how often the dataset is updated before adding data links")
        rules = rules + PERIOD_RULES[context.frequency]
    return rules


def validate_step(
    step: StepId,
    step_input: StepInput,
    context: ValidationContext,
) -> ValidationReport:
    """Validate a step submission.

    Errors are reported in rule order, one per failing field. Fields without
    a rule for this step are dropped from the cleaned values.
    """
    report = ValidationReport()

    for rule in rules_for(step, context):
        value = step_input.get(rule.field)
        try:
            report.cleaned[rule.field] = rule.parse(value, step_input, context)
        except ValueError:
            if rule.message_kind is None:
                report.cleaned[rule.field] = None
            else:
                report.errors.append(FieldError(rule.field, rule.message_kind))

    return report


def validate_period(frequency: Frequency, step_input: StepInput) -> ValidationReport:
    """Validate only the period fields a frequency requires."""
    report = ValidationReport()
    context = ValidationContext(frequency=frequency)

    for rule in PERIOD_RULES[Frequency(frequency)]:
        try:
            report.cleaned[rule.field] = rule.parse(step_input.get(rule.field), step_input, context)
        except ValueError:
            report.errors.append(FieldError(rule.field, rule.message_kind))

    return report
