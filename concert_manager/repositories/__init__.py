from .attendee_repository import attendee_repository
from .admin_repository import admin_repository
from .staff_repository import staff_repository
from .venue_repository import venue_repository
from .artist_repository import artist_repository
from .streaming_repository import streaming_repository
from .concert_repository import concert_repository
from .ticket_repository import ticket_repository
from .feedback_repository import feedback_repository
from .sponsorship_repository import sponsorship_repository
