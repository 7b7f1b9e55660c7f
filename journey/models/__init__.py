from .trip import Trip
from .participant import Participant
from .activity import Activity
