"""Message texts and labels shown to publishers."""

from dataset_publisher.application.dto.wizard import InlineMessage, RenderedErrors
from dataset_publisher.domain.entities import FieldError
from dataset_publisher.domain.enums import Frequency, Licence, MessageKind

ERROR_HEADING = "There was a problem"

MESSAGES: dict[MessageKind, str] = {
    MessageKind.INVALID_TITLE: "Please enter a valid title",
    MessageKind.MISSING_SUMMARY: "Please provide a summary",
    MessageKind.MISSING_TOPIC: "Please choose a topic",
    MessageKind.MISSING_LICENCE: "Please select a licence for your dataset",
    MessageKind.MISSING_FREQUENCY: "Please indicate how often this dataset is updated",
    MessageKind.INVALID_URL: "Please enter a valid url",
    MessageKind.INVALID_NAME: "Please enter a valid name",
    MessageKind.INVALID_DATE: "Please enter a valid date",
    MessageKind.INVALID_MONTH: "Please enter a valid month",
    MessageKind.INVALID_YEAR: "Please enter a valid year",
    MessageKind.INVALID_QUARTER: "Please select a quarter",
}

FREQUENCY_LABELS: dict[Frequency, str] = {
    Frequency.NEVER: "One-off",
    Frequency.DAILY: "Daily",
    Frequency.WEEKLY: "Weekly",
    Frequency.MONTHLY: "Monthly",
    Frequency.QUARTERLY: "Quarterly",
    Frequency.ANNUALLY: "Annually",
    Frequency.FINANCIAL_YEAR: "Every financial year",
}

LICENCE_TITLES: dict[Licence, str] = {
    Licence.UK_OGL: "Open Government Licence",
    Licence.CC_BY: "Creative Commons Attribution",
    Licence.CC_BY_SA: "Creative Commons Attribution Share-Alike",
    Licence.CC0: "Creative Commons CCZero",
    Licence.OTHER: "Other licence",
}


def message_for(kind: MessageKind) -> str:
    """Text for a message kind."""
    return MESSAGES[kind]


def render_errors(errors: list[FieldError]) -> RenderedErrors:
    """Render field errors inline and in the page summary.

    Both copies are kept; a page with N failing fields carries 2N messages.
    """
    texts = [message_for(error.message_kind) for error in errors]
    return RenderedErrors(
        heading=ERROR_HEADING,
        summary=texts,
        inline=[
            InlineMessage(field=error.field, text=text)
            for error, text in zip(errors, texts)
        ],
    )
