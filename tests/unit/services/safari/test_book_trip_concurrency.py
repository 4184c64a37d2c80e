import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from services.safari.applications.book_trip import BookTripService
from services.safari.domain.exception import InsufficientSeatsException
from services.safari.domain.value_object import Username
from services.safari.infrastructure.json_file_trip_repository import (
    JsonFileTripRepository,
)
from services.shared.domain import TripId


class SlowJsonFileTripRepository(JsonFileTripRepository):
    """読み込みと保存の間を広げて競合を起こしやすくする"""

    def load_all(self):
        trips = super().load_all()
        time.sleep(0.01)
        return trips


def _book_concurrently(service, requests):
    barrier = threading.Barrier(len(requests))

    def _attempt(args):
        user, seats = args
        barrier.wait()
        try:
            return service.book(TripId("trip-123"), seats, Username(user))
        except InsufficientSeatsException as e:
            return e

    with ThreadPoolExecutor(max_workers=len(requests)) as executor:
        return list(executor.map(_attempt, requests))


class TestConcurrentBooking:
    """同時予約で空席数が負にならないことのテスト"""

    @pytest.fixture
    def repository(self, tmp_path, create_trip):
        repository = SlowJsonFileTripRepository(tmp_path / "safari_trips.json")
        repository.save_all([create_trip(available_seats=4)])
        return repository

    def test_only_satisfiable_bookings_succeed(self, repository):
        """4席に対して1席ずつ10件同時に予約すると、成功は4件のみ"""
        service = BookTripService(repository=repository)
        requests = [(f"guest-{i}", 1) for i in range(10)]

        results = _book_concurrently(service, requests)

        succeeded = [r for r in results if not isinstance(r, Exception)]
        failed = [r for r in results if isinstance(r, InsufficientSeatsException)]
        assert len(succeeded) == 4
        assert len(failed) == 6

        trip = repository.find_by_id(TripId("trip-123"))
        assert trip.available_seats == 0
        assert len(trip.bookings) == 4
        assert trip.original_seats == 4

    def test_mixed_seat_requests_never_overbook(self, repository):
        service = BookTripService(repository=repository)
        requests = [("a", 3), ("b", 2), ("c", 2), ("d", 1), ("e", 3)]

        results = _book_concurrently(service, requests)

        booked = sum(r.seats_booked for r in results if not isinstance(r, Exception))
        trip = repository.find_by_id(TripId("trip-123"))
        assert booked <= 4
        assert trip.available_seats == 4 - booked
        assert trip.available_seats >= 0
        assert sum(b.seats_to_book for b in trip.bookings) == booked

    def test_bookings_on_different_trips_are_not_lost(
        self, tmp_path, create_trip
    ):
        """カタログ全体を保存するため、別の旅行への同時予約も失われない"""
        repository = SlowJsonFileTripRepository(tmp_path / "safari_trips.json")
        repository.save_all(
            [create_trip(trip_id=f"trip-{i}", available_seats=7) for i in range(4)]
        )
        service = BookTripService(repository=repository)
        barrier = threading.Barrier(8)

        def _attempt(i):
            barrier.wait()
            service.book(TripId(f"trip-{i % 4}"), 1, Username(f"guest-{i}"))

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(_attempt, range(8)))

        for trip in repository.load_all():
            assert trip.available_seats == 5
            assert len(trip.bookings) == 2

    def test_repositories_on_same_file_share_lock(self, tmp_path):
        first = JsonFileTripRepository(tmp_path / "safari_trips.json")
        second = JsonFileTripRepository(str(tmp_path / "safari_trips.json"))
        assert first.catalog_key == second.catalog_key
