"""Mapping of submitted form parameters to step inputs."""

import re
from collections.abc import Mapping

from dataset_publisher.application.services.step_flow import parse_step
from dataset_publisher.domain.enums import StepId
from dataset_publisher.domain.types import StepInput

_PARAM = re.compile(r"^(?P<scope>[a-z_]+)\[(?P<field>[a-z0-9_]+)\]$")

# Form scope and accepted fields for each step
STEP_FORMS: dict[StepId, tuple[str, tuple[str, ...]]] = {
    StepId.NEW: ("dataset", ("title", "summary", "description")),
    StepId.TOPIC: ("dataset", ("topic_id",)),
    StepId.LICENCE: ("dataset", ("licence_code",)),
    StepId.LOCATION: ("dataset", ("location1", "location2", "location3")),
    StepId.FREQUENCY: ("dataset", ("frequency",)),
    StepId.DATAFILES: ("datafile", ("url", "name", "day", "month", "quarter", "year")),
    StepId.DATAFILES_UNDATED: ("datafile", ("url", "name")),
    StepId.DOCS: ("doc", ("url", "name")),
    StepId.PUBLISH: ("dataset", ()),
}

# Form names that differ from the dataset field they fill
_ALIASES = {
    "topic": "topic_id",
    "licence": "licence_code",
}


def parse_step_form(step: StepId | str, params: Mapping[str, str]) -> StepInput:
    """Extract a step's fields from ``scope[field]`` form parameters.

    Parameters outside the step's scope or field list are ignored; blank
    values are kept so that validation reports them.
    """
    scope, fields = STEP_FORMS[parse_step(step)]
    step_input: StepInput = {}

    for name, value in params.items():
        match = _PARAM.match(name)
        if match is None or match.group("scope") != scope:
            continue
        field = _ALIASES.get(match.group("field"), match.group("field"))
        if field in fields:
            step_input[field] = value

    return step_input
