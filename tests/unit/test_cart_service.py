"""Unit tests for CartService."""

import re
from unittest.mock import patch

import pytest

from src.core.store import InMemoryStore
from src.models.catalog import OrderSize
from src.services.cart_service import CartService, generate_cart_id


@pytest.fixture
def cart_service(store: InMemoryStore) -> CartService:
    """Create CartService on an empty in-memory store."""
    return CartService(store=store)


class TestGenerateCartId:
    """Tests for generate_cart_id."""

    def test_uses_prefix_and_six_digits(self) -> None:
        """Test the cart number format."""
        assert re.fullmatch(r"LW-\d{6}", generate_cart_id("LW"))

    def test_suffix_is_last_six_digits_of_epoch_millis(self) -> None:
        """Test that the suffix comes from the clock."""
        with patch("src.services.cart_service.time.time_ns", return_value=1_718_040_123_456_000_000):
            assert generate_cart_id("LW") == "LW-123456"


class TestAddItem:
    """Tests for add_item."""

    def test_first_add_assigns_cart_id(self, cart_service: CartService) -> None:
        """Test that the cart gets a number on the first addition."""
        assert cart_service.get_cart()["cart_id"] is None

        cart = cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 1)

        assert cart["cart_id"] is not None
        assert cart["cart_id"].startswith("LW-")

    def test_cart_id_is_stable_across_adds(self, cart_service: CartService) -> None:
        """Test that later additions keep the same cart number."""
        first = cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 1)["cart_id"]

        with patch("src.services.cart_service.generate_cart_id", return_value="LW-999999"):
            second = cart_service.add_item("beet-shot", OrderSize.TWELVE_OUNCE, 1)["cart_id"]

        assert second == first

    def test_repeated_pairs_merge_into_one_line(self, cart_service: CartService) -> None:
        """Test that one line exists per (product, size) with summed quantity."""
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 2)
        cart_service.add_item("ginger-shot", OrderSize.TWELVE_OUNCE, 1)
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 3)
        cart = cart_service.add_item("ginger-shot", "7-Pack (2oz shots)", 1)

        assert len(cart["items"]) == 2
        seven = next(i for i in cart["items"] if i["size"] == OrderSize.SEVEN_SHOTS)
        twelve = next(i for i in cart["items"] if i["size"] == OrderSize.TWELVE_OUNCE)
        assert seven["quantity"] == 6
        assert twelve["quantity"] == 1

    def test_snapshots_product_name(self, cart_service: CartService) -> None:
        """Test that the line carries the catalog name."""
        cart = cart_service.add_item("turmeric-shot", OrderSize.TWELVE_OUNCE, 1)

        assert cart["items"][0]["product_name"] == "Golden Glow"

    def test_unknown_product_is_ignored(self, cart_service: CartService, store: InMemoryStore) -> None:
        """Test that unknown products change nothing, not even the cart id."""
        cart = cart_service.add_item("kale-shot", OrderSize.SEVEN_SHOTS, 1)

        assert cart == {"cart_id": None, "items": [], "donation_amount": 0}
        assert store.get("cart_id") is None

    def test_non_positive_quantity_for_new_line_is_ignored(
        self, cart_service: CartService, store: InMemoryStore
    ) -> None:
        """Test that adding zero or fewer units of a new line assigns no cart id."""
        cart = cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 0)

        assert cart == {"cart_id": None, "items": [], "donation_amount": 0}
        assert cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, -3)["cart_id"] is None
        assert store.get("cart_id") is None

    def test_merge_to_non_positive_removes_line(self, cart_service: CartService) -> None:
        """Test that a merge never leaves a non-positive quantity."""
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 2)

        cart = cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, -2)

        assert cart["items"] == []


class TestUpdateQuantity:
    """Tests for update_quantity."""

    def test_replaces_quantity(self, cart_service: CartService) -> None:
        """Test that the quantity is set, not added."""
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 2)

        cart = cart_service.update_quantity("ginger-shot", OrderSize.SEVEN_SHOTS, 5)

        assert cart["items"][0]["quantity"] == 5

    def test_zero_matches_remove_item(self) -> None:
        """Test that update_quantity(..., 0) behaves like remove_item."""
        via_update = CartService(store=InMemoryStore())
        via_remove = CartService(store=InMemoryStore())
        for service in (via_update, via_remove):
            service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 2)
            service.add_item("beet-shot", OrderSize.TWELVE_OUNCE, 1)

        updated = via_update.update_quantity("beet-shot", OrderSize.TWELVE_OUNCE, 0)
        removed = via_remove.remove_item("beet-shot", OrderSize.TWELVE_OUNCE)

        assert updated["items"] == removed["items"]

    def test_missing_line_is_noop(self, cart_service: CartService) -> None:
        """Test that updating a line not in the cart adds nothing."""
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 2)

        cart = cart_service.update_quantity("beet-shot", OrderSize.SEVEN_SHOTS, 3)

        assert len(cart["items"]) == 1


class TestRemoveItem:
    """Tests for remove_item."""

    def test_last_item_without_donation_releases_cart_id(self, cart_service: CartService) -> None:
        """Test that an empty cart with no donation drops its number."""
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 1)

        cart = cart_service.remove_item("ginger-shot", OrderSize.SEVEN_SHOTS)

        assert cart["items"] == []
        assert cart["cart_id"] is None

    def test_last_item_with_donation_keeps_cart_id(self, cart_service: CartService) -> None:
        """Test that a pending donation keeps the cart number."""
        cart_id = cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 1)["cart_id"]
        cart_service.set_donation(15)

        cart = cart_service.remove_item("ginger-shot", OrderSize.SEVEN_SHOTS)

        assert cart["items"] == []
        assert cart["cart_id"] == cart_id
        assert cart["donation_amount"] == 15

    def test_keeps_other_lines(self, cart_service: CartService) -> None:
        """Test that only the matching (product, size) line goes away."""
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 1)
        cart_service.add_item("ginger-shot", OrderSize.TWELVE_OUNCE, 1)

        cart = cart_service.remove_item("ginger-shot", OrderSize.SEVEN_SHOTS)

        assert [i["size"] for i in cart["items"]] == [OrderSize.TWELVE_OUNCE]
        assert cart["cart_id"] is not None


class TestDonationAndClear:
    """Tests for set_donation and clear."""

    def test_set_donation_stores_value(self, cart_service: CartService, store: InMemoryStore) -> None:
        """Test that the donation is persisted."""
        cart_service.set_donation(12.5)

        assert store.get("donation_amount") == 12.5

    def test_negative_donation_is_stored_as_given(self, cart_service: CartService) -> None:
        """Test that the service itself does not validate the donation."""
        assert cart_service.set_donation(-5)["donation_amount"] == -5

    def test_clear_resets_everything(self, cart_service: CartService) -> None:
        """Test that clear empties items, donation and cart id."""
        cart_service.add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 3)
        cart_service.set_donation(20)

        cart = cart_service.clear()

        assert cart == {"cart_id": None, "items": [], "donation_amount": 0}


class TestMalformedStore:
    """Tests for reading corrupt persisted cart state."""

    def test_falls_back_to_defaults(self) -> None:
        """Test that wrong-typed records read as an empty cart."""
        store = InMemoryStore({"cart": "oops", "cart_id": 42, "donation_amount": "ten"})

        cart = CartService(store=store).get_cart()

        assert cart == {"cart_id": None, "items": [], "donation_amount": 0}

    def test_malformed_lines_are_dropped(self) -> None:
        """Test that bad elements in an otherwise valid cart list are skipped."""
        good = {
            "product_id": "ginger-shot",
            "product_name": "Ginger Zinger",
            "size": "7-Pack (2oz shots)",
            "quantity": 2,
        }
        store = InMemoryStore(
            {
                "cart": [
                    "garbage",
                    {"product_id": "ginger-shot"},
                    {**good, "size": "Gallon"},
                    {**good, "quantity": 0},
                    {**good, "quantity": True},
                    good,
                ],
                "cart_id": "LW-000001",
            }
        )

        cart = CartService(store=store).get_cart()

        assert cart["items"] == [good]

    def test_add_item_over_malformed_lines(self) -> None:
        """Test that mutations work and rewrite the cart without bad elements."""
        store = InMemoryStore({"cart": ["garbage", {"product_id": "ginger-shot"}]})

        cart = CartService(store=store).add_item("ginger-shot", OrderSize.SEVEN_SHOTS, 1)

        assert [item["quantity"] for item in cart["items"]] == [1]
        assert len(store.get("cart")) == 1
