"""Domain enums for datasets, wizard steps and validation messages."""

from enum import Enum


class Frequency(str, Enum):
    """Update frequency of a dataset."""

    NEVER = "never"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"
    FINANCIAL_YEAR = "financial-year"


class DatasetStatus(str, Enum):
    """Publication status of a dataset."""

    DRAFT = "draft"
    PUBLISHED = "published"


class LifecycleState(str, Enum):
    """Lifecycle state derived from a dataset's status and completeness."""

    DRAFT_INCOMPLETE = "draft-incomplete"
    DRAFT_COMPLETE = "draft-complete"
    PUBLISHED = "published"


class LinkKind(str, Enum):
    """Link entry kind."""

    DATA = "data"
    DOC = "doc"


class Licence(str, Enum):
    """Known licence codes."""

    UK_OGL = "uk-ogl"
    CC_BY = "cc-by"
    CC_BY_SA = "cc-by-sa"
    CC0 = "cc-zero"
    OTHER = "other"


class StepId(str, Enum):
    """Wizard step identifiers."""

    NEW = "new"
    TOPIC = "topic"
    LICENCE = "licence"
    LOCATION = "location"
    FREQUENCY = "frequency"
    DATAFILES = "datafiles"
    DATAFILES_UNDATED = "datafiles-undated"  # frequency == never
    DOCS = "docs"
    PUBLISH = "publish"


class MessageKind(str, Enum):
    """Field validation message kinds."""

    INVALID_TITLE = "invalid-title"
    MISSING_SUMMARY = "missing-summary"
    MISSING_TOPIC = "missing-topic"
    MISSING_LICENCE = "missing-licence"
    MISSING_FREQUENCY = "missing-frequency"
    INVALID_URL = "invalid-url"
    INVALID_NAME = "invalid-name"
    INVALID_DATE = "invalid-date"
    INVALID_MONTH = "invalid-month"
    INVALID_YEAR = "invalid-year"
    INVALID_QUARTER = "invalid-quarter"
