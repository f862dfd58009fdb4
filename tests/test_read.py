"""
Unit tests for read decisions.
"""

import pytest

from permissions.decisions import can_read

LISTING_TYPES = ["hero_slides", "categories", "products", "auctions", "shops"]


class TestPublicListingRead:
    """Read access to public-listing resource types."""

    @pytest.mark.parametrize("resource_type", LISTING_TYPES)
    def test_admin_reads_everything(self, admin_user, resource_type):
        assert can_read(admin_user, resource_type, {"status": "draft", "shopId": "other-shop"}) is True

    @pytest.mark.parametrize("resource_type", LISTING_TYPES)
    def test_seller_reads_own_drafts(self, seller_user, resource_type):
        assert can_read(seller_user, resource_type, {"status": "draft", "shopId": "shop-789"}) is True

    @pytest.mark.parametrize("resource_type", LISTING_TYPES)
    def test_seller_cannot_read_other_drafts(self, seller_user, resource_type):
        assert can_read(seller_user, resource_type, {"status": "draft", "shopId": "other-shop"}) is False

    @pytest.mark.parametrize("resource_type", LISTING_TYPES)
    @pytest.mark.parametrize("data", [
        {"status": "active"},
        {"status": "published"},
        {"status": "approved"},
        {"isActive": True},
    ])
    def test_anyone_reads_public_items(self, guest_user, regular_user, resource_type, data):
        assert can_read(None, resource_type, data) is True
        assert can_read(guest_user, resource_type, data) is True
        assert can_read(regular_user, resource_type, data) is True

    @pytest.mark.parametrize("resource_type", LISTING_TYPES)
    def test_guests_cannot_read_drafts(self, resource_type):
        assert can_read(None, resource_type, {"status": "draft"}) is False

    def test_is_active_must_be_true_boolean(self):
        assert can_read(None, "products", {"isActive": "true"}) is False
        assert can_read(None, "products", {"isActive": 1}) is False
        assert can_read(None, "products", {"isActive": False}) is False

    def test_user_does_not_get_author_access_to_listings(self, regular_user):
        assert can_read(regular_user, "products", {"status": "draft", "userId": "user-101"}) is False


class TestReviewRead:
    """Read access to moderated reviews."""

    def test_admin_reads_pending(self, admin_user):
        assert can_read(admin_user, "reviews", {"status": "pending", "shopId": "shop-789"}) is True

    def test_seller_reads_reviews_for_own_shop(self, seller_user):
        assert can_read(seller_user, "reviews", {"status": "pending", "shopId": "shop-789"}) is True
        assert can_read(seller_user, "reviews", {"status": "pending", "shopId": "other-shop"}) is False

    def test_anyone_reads_approved(self, guest_user):
        assert can_read(None, "reviews", {"status": "approved"}) is True
        assert can_read(guest_user, "reviews", {"status": "approved"}) is True

    def test_author_reads_own_pending_review(self, regular_user):
        assert can_read(regular_user, "reviews", {"status": "pending", "userId": "user-101"}) is True
        assert can_read(regular_user, "reviews", {"status": "pending", "createdBy": "user-101"}) is True

    def test_user_cannot_read_others_pending(self, regular_user):
        assert can_read(regular_user, "reviews", {"status": "pending", "userId": "other-user"}) is False

    def test_guest_cannot_read_pending(self, guest_user):
        assert can_read(None, "reviews", {"status": "pending"}) is False
        assert can_read(guest_user, "reviews", {"status": "pending", "userId": "guest-999"}) is False


class TestCouponRead:
    """Coupons need a signed-in reader even when active."""

    def test_admin_reads_inactive(self, admin_user):
        assert can_read(admin_user, "coupons", {"status": "inactive", "shopId": "shop-789"}) is True

    def test_seller_reads_own_coupons(self, seller_user):
        assert can_read(seller_user, "coupons", {"status": "inactive", "shopId": "shop-789"}) is True
        assert can_read(seller_user, "coupons", {"status": "inactive", "createdBy": "seller-456"}) is True

    def test_seller_reads_active_coupons_of_other_shops(self, seller_user):
        assert can_read(seller_user, "coupons", {"status": "active", "shopId": "other-shop"}) is True

    def test_user_reads_active_only(self, regular_user):
        assert can_read(regular_user, "coupons", {"status": "active"}) is True
        assert can_read(regular_user, "coupons", {"status": "inactive", "shopId": "other-shop"}) is False

    def test_guest_and_null_cannot_read(self, guest_user):
        assert can_read(guest_user, "coupons", {"status": "active"}) is False
        assert can_read(None, "coupons", {"status": "active"}) is False


class TestPrivateRead:
    """Read access to orders, tickets and payouts."""

    def test_null_actor_denied(self):
        assert can_read(None, "orders", {"userId": "user-101"}) is False
        assert can_read(None, "tickets", {"userId": "user-101"}) is False
        assert can_read(None, "payouts", {"shopId": "shop-789"}) is False

    def test_admin_reads_all(self, admin_user):
        assert can_read(admin_user, "orders", {"userId": "other"}) is True
        assert can_read(admin_user, "tickets", {"userId": "other"}) is True
        assert can_read(admin_user, "payouts", {"shopId": "other"}) is True

    def test_seller_orders(self, seller_user):
        assert can_read(seller_user, "orders", {"userId": "other", "shopId": "shop-789"}) is True
        assert can_read(seller_user, "orders", {"userId": "other", "shopId": "other-shop"}) is False

    def test_seller_reads_own_purchases(self, seller_user):
        assert can_read(seller_user, "orders", {"userId": "seller-456", "shopId": "other-shop"}) is True

    def test_user_orders(self, regular_user):
        assert can_read(regular_user, "orders", {"userId": "user-101", "shopId": "shop-789"}) is True
        assert can_read(regular_user, "orders", {"createdBy": "user-101", "shopId": "shop-789"}) is True
        assert can_read(regular_user, "orders", {"userId": "other", "shopId": "shop-789"}) is False

    def test_seller_tickets(self, seller_user):
        assert can_read(seller_user, "tickets", {"userId": "other", "shopId": "shop-789"}) is True
        assert can_read(seller_user, "tickets", {"createdBy": "seller-456", "shopId": "other"}) is True
        assert can_read(seller_user, "tickets", {"userId": "seller-456", "shopId": "other"}) is True
        assert can_read(seller_user, "tickets", {"userId": "other", "shopId": "other"}) is False

    def test_user_tickets(self, regular_user):
        assert can_read(regular_user, "tickets", {"userId": "user-101", "shopId": "shop-789"}) is True
        assert can_read(regular_user, "tickets", {"userId": "other", "shopId": "shop-789"}) is False

    def test_payouts(self, seller_user, regular_user):
        assert can_read(seller_user, "payouts", {"shopId": "shop-789", "amount": 1000}) is True
        assert can_read(seller_user, "payouts", {"shopId": "other-shop", "amount": 1000}) is False
        assert can_read(regular_user, "payouts", {"shopId": "shop-789", "amount": 1000}) is False

    def test_guest_cannot_read_own_private_records(self, guest_user):
        assert can_read(guest_user, "orders", {"userId": "guest-999"}) is False
        assert can_read(guest_user, "tickets", {"createdBy": "guest-999"}) is False


class TestProfileRead:
    """Read access to user profiles."""

    def test_own_profile(self, regular_user):
        assert can_read(regular_user, "users", {"uid": "user-101", "name": "Test User"}) is True
        assert can_read(regular_user, "users", {"id": "user-101", "name": "Test User"}) is True

    def test_other_profile(self, regular_user):
        assert can_read(regular_user, "users", {"uid": "other-user"}) is False

    def test_seller_reads_own_profile(self, seller_user):
        assert can_read(seller_user, "users", {"uid": "seller-456"}) is True

    def test_admin_reads_any_profile(self, admin_user):
        assert can_read(admin_user, "users", {"uid": "any-user"}) is True

    def test_null_and_guest_denied(self, guest_user):
        assert can_read(None, "users", {"uid": "user-101"}) is False
        assert can_read(guest_user, "users", {"uid": "guest-999"}) is False


class TestReadEdgeCases:
    """Missing data, unknown types and malformed input."""

    def test_missing_data(self, admin_user, seller_user):
        assert can_read(admin_user, "products") is True
        assert can_read(None, "products") is False
        assert can_read(seller_user, "orders") is False

    def test_no_status_field(self, seller_user):
        assert can_read(seller_user, "products", {"shopId": "shop-789"}) is True
        assert can_read(None, "products", {"shopId": "shop-789"}) is False

    def test_unknown_resource_type(self, admin_user, seller_user):
        assert can_read(admin_user, "invoices", {"status": "active"}) is True
        assert can_read(seller_user, "invoices", {"status": "active"}) is False
        assert can_read(None, "invoices", {"status": "active"}) is False

    def test_unknown_role_denied(self):
        actor = {"id": "x-1", "role": "superuser"}
        assert can_read(actor, "products", {"status": "active"}) is False

    def test_mapping_actor(self):
        actor = {"uid": "seller-456", "role": "seller", "shopId": "shop-789"}
        assert can_read(actor, "products", {"status": "draft", "shopId": "shop-789"}) is True

    @pytest.mark.parametrize("data", [
        "not-a-mapping",
        42,
        [("status", "active")],
        {"status": 1, "shopId": object()},
        {1: "active"},
    ])
    def test_malformed_data_denied(self, regular_user, data):
        assert can_read(regular_user, "products", data) is False

    @pytest.mark.parametrize("actor", ["admin", 7, {"role": "admin"}, {"id": None, "role": "admin"}])
    def test_malformed_actor_is_anonymous(self, actor):
        assert can_read(actor, "products", {"status": "draft"}) is False
        assert can_read(actor, "products", {"status": "active"}) is True
