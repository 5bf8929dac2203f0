"""
Tenant bootstrap tests.

Service-level tests run against the test session with an in-memory
identity provider; route tests go through /api/auth/complete-signup.
"""

import pytest
from dataclasses import dataclass
from datetime import date, datetime, UTC

from sqlalchemy.exc import OperationalError

from app.core.exceptions import PrincipalNotFoundException
from app.models.account import Account, AccountStatus
from app.models.account_product import AccountProduct
from app.models.call_note import CallNote
from app.models.company import Company
from app.models.contact import Contact
from app.models.product import Product
from app.models.shipping_location import ShippingLocation
from app.models.user_profile import UserProfile
from app.schemas.tenant_schemas import BootstrapRequest
from app.seed.template_data import (
    DEFAULT_TEMPLATE,
    TemplateAccount,
    TemplateAccountProduct,
    TemplateCallNote,
    TemplateContact,
    TemplateDataset,
    TemplateShippingLocation,
)
from app.services.bootstrap_service import (
    GENERIC_FAILURE,
    TenantBootstrapService,
    company_name_for,
    normalize_call_date,
    resolve_best_effort,
)
from tests.conftest import complete_signup, create_test_token, headers_for


@dataclass
class FakePrincipal:
    id: str
    email: str | None
    display_name: str | None


class FakeIdentityProvider:
    """In-memory identity provider"""

    def __init__(self, *principals: FakePrincipal):
        self.principals = {principal.id: principal for principal in principals}

    def get_user(self, user_id: str):
        if user_id not in self.principals:
            raise PrincipalNotFoundException(f"User {user_id} not found.")
        return self.principals[user_id]

    def get_user_by_email(self, email: str):
        for principal in self.principals.values():
            if principal.email == email:
                return principal
        raise PrincipalNotFoundException(f"User with email {email} not found.")


class UnreachableIdentityProvider:
    """Identity provider whose backing store is down"""

    def get_user(self, user_id: str):
        raise OperationalError("SELECT principals", {}, Exception("connection reset"))

    def get_user_by_email(self, email: str):
        raise OperationalError("SELECT principals", {}, Exception("connection reset"))


ALICE = FakePrincipal(id="alice", email="alice@example.com", display_name="Alice")
ALICE_REQUEST = BootstrapRequest(user_id="alice", email="alice@example.com", display_name="Alice")


def make_service(db_session, template: TemplateDataset = DEFAULT_TEMPLATE) -> TenantBootstrapService:
    return TenantBootstrapService(db_session, identity_provider=FakeIdentityProvider(ALICE), template=template)


class TestBootstrapSeeding:
    """A new user gets a company populated from the template"""

    def test_creates_company_and_profile(self, db_session):
        result = make_service(db_session).bootstrap(ALICE_REQUEST)

        assert result.success is True
        assert result.created is True
        company = db_session.query(Company).filter_by(id=result.company_id).one()
        assert company.name == "Alice's Company"
        assert company.owner_id == "alice"
        profile = db_session.get(UserProfile, "alice")
        assert profile.company_id == company.id
        assert profile.email == "alice@example.com"

    def test_clones_every_collection(self, db_session):
        result = make_service(db_session).bootstrap(ALICE_REQUEST)

        company_id = result.company_id
        assert db_session.query(Account).filter_by(company_id=company_id).count() == len(DEFAULT_TEMPLATE.accounts)
        assert db_session.query(Contact).filter_by(company_id=company_id).count() == len(DEFAULT_TEMPLATE.contacts)
        assert db_session.query(Product).filter_by(company_id=company_id).count() == len(DEFAULT_TEMPLATE.products)
        assert db_session.query(AccountProduct).filter_by(company_id=company_id).count() == len(
            DEFAULT_TEMPLATE.account_products
        )
        assert db_session.query(ShippingLocation).filter_by(company_id=company_id).count() == len(
            DEFAULT_TEMPLATE.shipping_locations
        )
        assert db_session.query(CallNote).filter_by(company_id=company_id).count() == len(
            DEFAULT_TEMPLATE.call_notes
        )

    def test_template_ids_never_written(self, db_session):
        make_service(db_session).bootstrap(ALICE_REQUEST)

        template_account_ids = {account.id for account in DEFAULT_TEMPLATE.accounts}
        account_ids = {account.id for account in db_session.query(Account).all()}
        assert account_ids.isdisjoint(template_account_ids)

    def test_references_point_at_new_accounts(self, db_session):
        result = make_service(db_session).bootstrap(ALICE_REQUEST)

        account_ids = {
            account.id for account in db_session.query(Account).filter_by(company_id=result.company_id).all()
        }
        for link in db_session.query(AccountProduct).all():
            assert link.account_id in account_ids
        for note in db_session.query(CallNote).all():
            assert note.account_id in account_ids
        for location in db_session.query(ShippingLocation).all():
            assert location.original_account_id in account_ids
            assert location.related_account_id in account_ids

    def test_shipping_location_keeps_account_pairing(self, db_session):
        make_service(db_session).bootstrap(ALICE_REQUEST)

        location = db_session.query(ShippingLocation).one()
        assert location.original_account.name == "Apex Manufacturing"
        assert location.related_account.name == "Apex Gary Terminal"

    def test_product_id_kept_on_account_products(self, db_session):
        make_service(db_session).bootstrap(ALICE_REQUEST)

        product_ids = sorted(link.product_id for link in db_session.query(AccountProduct).all())
        assert product_ids == sorted(link.product_id for link in DEFAULT_TEMPLATE.account_products)

    def test_missing_call_date_defaults_to_now(self, db_session):
        before = datetime.now(UTC)
        make_service(db_session).bootstrap(ALICE_REQUEST)

        intro = db_session.query(CallNote).filter(CallNote.note.like("Intro call%")).one()
        call_date = intro.call_date if intro.call_date.tzinfo else intro.call_date.replace(tzinfo=UTC)
        assert call_date >= before.replace(microsecond=0)

    def test_company_named_after_email_without_display_name(self, db_session):
        principal = FakePrincipal(id="carol", email="carol@example.com", display_name=None)
        service = TenantBootstrapService(db_session, identity_provider=FakeIdentityProvider(principal))

        result = service.bootstrap(BootstrapRequest(user_id="carol", email="carol@example.com"))

        company = db_session.get(Company, result.company_id)
        assert company.name == "Company for carol@example.com"


class TestBootstrapIdempotence:
    """Repeated bootstrap never seeds a second company"""

    def test_second_call_is_a_noop(self, db_session):
        service = make_service(db_session)
        first = service.bootstrap(ALICE_REQUEST)
        second = service.bootstrap(ALICE_REQUEST)

        assert second.success is True
        assert second.created is False
        assert second.company_id == first.company_id
        assert db_session.query(Company).count() == 1
        assert db_session.query(Account).count() == len(DEFAULT_TEMPLATE.accounts)

    def test_existing_profile_left_untouched(self, db_session):
        db_session.add(UserProfile(id="alice", email="alice@example.com", display_name="Alice", company_id="legacy"))
        db_session.commit()

        result = make_service(db_session).bootstrap(ALICE_REQUEST)

        assert result.success is True
        assert result.created is False
        assert result.company_id == "legacy"
        assert db_session.query(Account).count() == 0


class TestBootstrapFailures:
    """Failures leave no trace and are reported, not raised"""

    def test_unknown_user(self, db_session):
        request = BootstrapRequest(user_id="ghost", email="ghost@example.com")

        result = make_service(db_session).bootstrap(request)

        assert result.success is False
        assert result.error == "User ghost not found."
        assert db_session.query(Company).count() == 0

    def test_failure_mid_seed_writes_nothing(self, db_session, monkeypatch):
        def explode(self, company_id, account_ids):
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(TenantBootstrapService, "_clone_call_notes", explode)

        result = make_service(db_session).bootstrap(ALICE_REQUEST)

        assert result.success is False
        assert result.error == "store unavailable"
        assert db_session.query(Company).count() == 0
        assert db_session.query(UserProfile).count() == 0
        assert db_session.query(Account).count() == 0
        assert db_session.query(Contact).count() == 0
        assert db_session.query(ShippingLocation).count() == 0

    def test_retry_after_failure_succeeds(self, db_session, monkeypatch):
        original = TenantBootstrapService._clone_call_notes

        def explode(self, company_id, account_ids):
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(TenantBootstrapService, "_clone_call_notes", explode)
        assert make_service(db_session).bootstrap(ALICE_REQUEST).success is False

        monkeypatch.setattr(TenantBootstrapService, "_clone_call_notes", original)
        result = make_service(db_session).bootstrap(ALICE_REQUEST)

        assert result.success is True
        assert result.created is True

    def test_identity_lookup_failure_is_reported(self, db_session):
        service = TenantBootstrapService(db_session, identity_provider=UnreachableIdentityProvider())

        result = service.bootstrap(ALICE_REQUEST)

        assert result.success is False
        assert result.error == GENERIC_FAILURE
        assert db_session.query(Company).count() == 0

    def test_concurrent_signup_loser_writes_nothing(self, db_session, monkeypatch):
        winner = UserProfile(id="alice", email="alice@example.com", display_name="Alice", company_id="winner-co")
        db_session.add(winner)
        db_session.commit()
        db_session.expunge_all()
        service = make_service(db_session)
        # The loser read no profile before the winner committed
        monkeypatch.setattr(service.profile_repo, "get_by_id", lambda user_id: None)

        result = service.bootstrap(ALICE_REQUEST)

        assert result.success is False
        assert result.error == GENERIC_FAILURE
        assert db_session.query(Company).count() == 0
        assert db_session.query(Account).count() == 0
        profiles = db_session.query(UserProfile).all()
        assert [(profile.id, profile.company_id) for profile in profiles] == [("alice", "winner-co")]


class TestUnresolvedReferences:
    """Records pointing at accounts outside the template are skipped"""

    TEMPLATE = TemplateDataset(
        accounts=(
            TemplateAccount("a1", "N-1", "First", "Retail", AccountStatus.CUSTOMER),
            TemplateAccount("a2", "N-2", "Second", "Retail", AccountStatus.LEAD),
        ),
        account_products=(
            TemplateAccountProduct("ap_ok", "a1", "p1"),
            TemplateAccountProduct("ap_bad", "missing", "p1"),
        ),
        shipping_locations=(
            TemplateShippingLocation("sl_ok", "a1", "a2"),
            TemplateShippingLocation("sl_bad", "a1", "missing"),
        ),
        call_notes=(
            TemplateCallNote("cn_ok", "a2", "kept", call_date="2024-01-05T09:00:00+00:00"),
            TemplateCallNote("cn_bad", "missing", "dropped"),
        ),
    )

    def test_dependents_with_dangling_account_are_skipped(self, db_session):
        result = make_service(db_session, template=self.TEMPLATE).bootstrap(ALICE_REQUEST)

        assert result.success is True
        assert db_session.query(Account).count() == 2
        assert db_session.query(AccountProduct).count() == 1
        assert db_session.query(ShippingLocation).count() == 1
        notes = db_session.query(CallNote).all()
        assert [note.note for note in notes] == ["kept"]


class TestHelpers:
    def test_resolve_best_effort_all_known(self):
        assert resolve_best_effort({"a": "1", "b": "2"}, "a", "b") == ("1", "2")

    def test_resolve_best_effort_any_missing(self):
        assert resolve_best_effort({"a": "1"}, "a", "b") is None

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-06-12T15:30:00+00:00", datetime(2024, 6, 12, 15, 30, tzinfo=UTC)),
            (datetime(2024, 6, 12, 15, 30), datetime(2024, 6, 12, 15, 30, tzinfo=UTC)),
            (date(2024, 6, 12), datetime(2024, 6, 12, tzinfo=UTC)),
        ],
    )
    def test_normalize_call_date_keeps_concrete_dates(self, value, expected):
        now = datetime(2030, 1, 1, tzinfo=UTC)
        assert normalize_call_date(value, now) == expected

    @pytest.mark.parametrize("value", [None, "", "next tuesday", 12345])
    def test_normalize_call_date_falls_back_to_now(self, value):
        now = datetime(2030, 1, 1, tzinfo=UTC)
        assert normalize_call_date(value, now) == now

    def test_company_name(self):
        assert company_name_for("Dana", "dana@example.com") == "Dana's Company"
        assert company_name_for(None, "dana@example.com") == "Company for dana@example.com"


class TestCompleteSignupRoute:
    def test_signup_seeds_company(self, client, auth_headers):
        body = complete_signup(client, auth_headers)

        assert body["success"] is True
        assert body["created"] is True

        me = client.get("/api/auth/me", headers=auth_headers).json()
        assert me["company_id"] == body["company_id"]
        assert me["company_name"] == "Test User's Company"

    def test_signup_twice_reports_existing_company(self, client, auth_headers):
        first = complete_signup(client, auth_headers)
        second = complete_signup(client, auth_headers)

        assert second["created"] is False
        assert second["company_id"] == first["company_id"]

    def test_me_before_signup(self, client, auth_headers):
        me = client.get("/api/auth/me", headers=auth_headers).json()

        assert me["user_id"] == "test-user-123"
        assert me["company_id"] is None
        assert me["company_name"] is None

    def test_signup_requires_email_claim(self, client):
        token = create_test_token(user_id="no-email", email=None)
        response = client.post("/api/auth/complete-signup", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 400

    def test_users_get_separate_companies(self, client):
        first = complete_signup(client, headers_for("user-1"))
        second = complete_signup(client, headers_for("user-2"))

        assert first["company_id"] != second["company_id"]


class TestEndToEndScenario:
    """One account, one contact, one call note cloned into a fresh company"""

    TEMPLATE = TemplateDataset(
        accounts=(TemplateAccount("A", "ACC-1", "Solo Account", "Retail", AccountStatus.CUSTOMER),),
        contacts=(TemplateContact("C", "ACC-1", "Sam Solo", email="sam@example.com", is_main_contact=True),),
        call_notes=(TemplateCallNote("N", "A", "first call", call_date="2024-03-01T12:00:00+00:00"),),
    )

    def test_single_record_template(self, db_session):
        result = make_service(db_session, template=self.TEMPLATE).bootstrap(ALICE_REQUEST)

        assert result.success is True
        assert db_session.query(Company).count() == 1
        assert db_session.query(UserProfile).count() == 1

        account = db_session.query(Account).one()
        assert account.id != "A"
        assert account.company_id == result.company_id

        contact = db_session.query(Contact).one()
        assert contact.id != "C"
        assert contact.account_number == "ACC-1"
        assert contact.company_id == result.company_id

        note = db_session.query(CallNote).one()
        assert note.id != "N"
        assert note.account_id == account.id
        assert note.call_date.replace(tzinfo=None) == datetime(2024, 3, 1, 12, 0)
