"""
Resumable Hash Engine
=====================
bcrypt as a resumable job plus the time-slice controller that bounds
each resumption.
"""

from .models import JobState, Pending, Done, SliceResult, SliceOutcome
from .slicing import SliceController, Timeslice, calc_percent, adjust_batch_size
from .job import HashJob, resume, run_to_completion

__all__ = [
    # Models
    "JobState",
    "Pending",
    "Done",
    "SliceResult",
    "SliceOutcome",
    # Slicing
    "SliceController",
    "Timeslice",
    "calc_percent",
    "adjust_batch_size",
    # Job
    "HashJob",
    "resume",
    "run_to_completion",
]
