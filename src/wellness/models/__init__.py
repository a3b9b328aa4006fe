from .activity import Activity, DATE_FORMAT
from .summary import Summary
from .outcome import ErrorKind, Outcome
