"""
In-memory Store Tests
"""

import pytest

from marketplace.models.user import Account, Profile, RoleId


def make_account(account_id="acct-1", email="a@example.com"):
    return Account(
        id=account_id, email=email, password="pw", first_name="A", last_name="B"
    )


class TestMarketplaceStore:
    def test_account_lookup(self, store):
        account = store.add_account(make_account())

        assert store.get_account_by_id("acct-1") is account
        assert store.get_account_by_email("a@example.com") is account
        assert store.get_account_by_email("A@example.com") is None
        assert store.email_exists("a@example.com")

    def test_duplicate_email_rejected(self, store):
        store.add_account(make_account())
        with pytest.raises(ValueError):
            store.add_account(make_account(account_id="acct-2"))
        assert store.stats()['accounts'] == 1

    def test_sessions_map_tokens_to_accounts(self, store):
        store.add_account(make_account())
        store.create_session("acct-1", "t1")
        store.create_session("acct-1", "t2")

        assert store.get_session("t1") == "acct-1"
        assert store.get_session("t2") == "acct-1"
        assert store.get_session("t3") is None

    def test_token_cannot_be_reissued(self, store):
        store.create_session("acct-1", "t1")
        with pytest.raises(ValueError):
            store.create_session("acct-2", "t1")

    def test_one_profile_per_account(self, store):
        store.add_account(make_account())
        store.add_profile(Profile(id="p1", user_id="acct-1", unique_id="CUSTOMER-1-ABCDEF", role=RoleId.CUSTOMER))

        with pytest.raises(ValueError):
            store.add_profile(Profile(id="p2", user_id="acct-1", unique_id="CUSTOMER-2-ABCDEF", role=RoleId.CUSTOMER))

        assert store.get_profile("acct-1").id == "p1"
        assert store.unique_id_exists("CUSTOMER-1-ABCDEF")
        assert not store.unique_id_exists("CUSTOMER-2-ABCDEF")

    def test_unique_ids_not_reused_across_accounts(self, store):
        store.add_profile(Profile(id="p1", user_id="acct-1", unique_id="BIZ-0001-AAAAAA", role=RoleId.WHOLESALER))
        with pytest.raises(ValueError):
            store.add_profile(Profile(id="p2", user_id="acct-2", unique_id="BIZ-0001-AAAAAA", role=RoleId.WHOLESALER))

    def test_stats(self, store):
        assert store.stats() == {'accounts': 0, 'sessions': 0, 'profiles': 0}
