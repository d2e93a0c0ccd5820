"""Wizard step sequence and frequency branching."""

from dataset_publisher.domain.enums import Frequency, StepId
from dataset_publisher.domain.errors import FrequencyNotSetError, InvalidStepError

STEP_SEQUENCE: tuple[StepId, ...] = (
    StepId.NEW,
    StepId.TOPIC,
    StepId.LICENCE,
    StepId.LOCATION,
    StepId.FREQUENCY,
    StepId.DATAFILES,
    StepId.DOCS,
    StepId.PUBLISH,
)

# Data link step each frequency leads to
FREQUENCY_ROUTES: dict[Frequency, StepId] = {
    Frequency.NEVER: StepId.DATAFILES_UNDATED,
    Frequency.DAILY: StepId.DATAFILES,
    Frequency.WEEKLY: StepId.DATAFILES,
    Frequency.MONTHLY: StepId.DATAFILES,
    Frequency.QUARTERLY: StepId.DATAFILES,
    Frequency.ANNUALLY: StepId.DATAFILES,
    Frequency.FINANCIAL_YEAR: StepId.DATAFILES,
}

_unrouted = set(Frequency) - set(FREQUENCY_ROUTES)
if _unrouted:
    raise RuntimeError(f"No step route for frequencies: {sorted(f.value for f in _unrouted)}")

_FOLLOWING: dict[StepId, StepId] = {
    step: following for step, following in zip(STEP_SEQUENCE, STEP_SEQUENCE[1:])
}
_FOLLOWING[StepId.DATAFILES_UNDATED] = StepId.DOCS


def parse_step(step: StepId | str) -> StepId:
    """Step id for a step name."""
    try:
        return StepId(step)
    except ValueError as e:
        raise InvalidStepError(f"Unknown step '{step}'") from e


def first_step() -> StepId:
    """Step a new draft starts at."""
    return STEP_SEQUENCE[0]


def datafiles_step(frequency: Frequency) -> StepId:
    """Data link step variant for a frequency."""
    return FREQUENCY_ROUTES[Frequency(frequency)]


def next_step(step: StepId, frequency: Frequency | None) -> StepId:
    """Step that follows a successful submission of ``step``."""
    if step == StepId.FREQUENCY:
        if frequency is None:
            raise FrequencyNotSetError("Frequency step completed without a frequency")
        return datafiles_step(frequency)
    if step not in _FOLLOWING:
        raise InvalidStepError(f"No step follows '{parse_step(step).value}'")
    return _FOLLOWING[step]
