from enum import StrEnum

from prometheus_client import Counter, Histogram


class BookSeatOutcome(StrEnum):
    BOOKED = 'booked'
    WEBINAR_NOT_FOUND = 'webinar_not_found'
    DATES_TOO_SOON = 'dates_too_soon'
    ALREADY_REGISTERED = 'already_registered'
    FULLY_BOOKED = 'fully_booked'
    ERROR = 'error'


class WebinarBookingMetrics:
    """Seat booking business metrics exposed on /metrics"""

    def __init__(self) -> None:
        self.book_seat_requests = Counter(
            'webinar_book_seat_requests_total',
            'Total book-seat requests by outcome',
            ['outcome'],
        )

        self.book_seat_duration = Histogram(
            'webinar_book_seat_duration_seconds',
            'Book-seat processing time',
            ['outcome'],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
        )

        self.notifications_sent = Counter(
            'webinar_organizer_notifications_total',
            'Mails sent to webinar organizers',
        )

    def record_book_seat(self, *, outcome: BookSeatOutcome, duration: float) -> None:
        self.book_seat_requests.labels(outcome=outcome.value).inc()
        self.book_seat_duration.labels(outcome=outcome.value).observe(duration)

    def record_notification_sent(self) -> None:
        self.notifications_sent.inc()


# Global metrics instance (prometheus collectors register once per process)
metrics = WebinarBookingMetrics()
