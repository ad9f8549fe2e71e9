"""
Engine Models
=============
Job states and resumption results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .job import HashJob


class JobState(str, Enum):
    """Lifecycle of a hash job."""
    CREATED = "created"
    EXPANDING = "expanding"
    FINALIZING = "finalizing"
    DONE = "done"
    DISCARDED = "discarded"


@dataclass
class Pending:
    """More work remains; resume the job again later."""
    job: "HashJob"
    done: bool = False


@dataclass(frozen=True)
class Done:
    """The job finished and produced a crypt string."""
    crypt_string: str
    done: bool = True


SliceResult = Union[Pending, Done]


@dataclass(frozen=True)
class SliceOutcome:
    """What one controller invocation accomplished."""
    progress: int
    batch_size: int
    finished: bool
    iterations: int
