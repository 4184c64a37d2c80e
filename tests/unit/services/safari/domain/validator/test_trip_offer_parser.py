from decimal import Decimal

from services.safari.domain.validator import TripOfferParser


class TestTripOfferParser:
    def test_parse_form_strings(self, raw_offer):
        offer = TripOfferParser().parse(raw_offer)

        assert offer["itinerary"] == ["Arusha", "Serengeti"]
        assert offer["available_seats"] == 4
        assert offer["days"] == 5
        assert offer["price_per_person"] == Decimal("100")
        assert offer["start_date"] == "2025-07-01"
        assert "title" not in offer

    def test_already_typed_values_are_kept(self):
        offer = TripOfferParser().parse(
            {
                "itinerary": ["Natron"],
                "available_seats": 3,
                "price_per_person": 250.5,
                "days": 2.0,
            }
        )

        assert offer["itinerary"] == ["Natron"]
        assert offer["available_seats"] == 3
        assert offer["price_per_person"] == Decimal("250.5")
        assert offer["days"] == 2

    def test_unparseable_numbers_become_none(self):
        offer = TripOfferParser().parse(
            {"available_seats": "three", "price_per_person": "cheap", "days": "2.5"}
        )

        assert offer["available_seats"] is None
        assert offer["price_per_person"] is None
        assert offer["days"] is None

    def test_invalid_itinerary_json_is_left_as_string(self):
        offer = TripOfferParser().parse({"itinerary": "[Arusha"})
        assert offer["itinerary"] == "[Arusha"

    def test_optional_title_and_image(self, raw_offer):
        raw_offer["title"] = "  Northern Circuit  "
        raw_offer["image"] = ""

        offer = TripOfferParser().parse(raw_offer)

        assert offer["title"] == "Northern Circuit"
        assert "image" not in offer
