"""
Built-in seed data cloned into every newly bootstrapped company.

The dataset is immutable and process-wide: records are frozen
dataclasses held in tuples, and their ids live in template space only.
Tenant bootstrap never writes these ids to the database; it generates
fresh ids and remaps account references through a per-run table.
"""

from dataclasses import dataclass
from datetime import date, datetime

from app.models.account import AccountStatus
from app.models.account_product import PriceDetailType


@dataclass(frozen=True)
class TemplateAccount:
    id: str
    account_number: str
    name: str
    industry: str
    status: AccountStatus
    details: str = ""
    address: str | None = None


@dataclass(frozen=True)
class TemplateContact:
    id: str
    account_number: str
    name: str
    phone: str = ""
    email: str = ""
    location: str = ""
    is_main_contact: bool = False
    avatar_url: str = ""


@dataclass(frozen=True)
class TemplateProduct:
    id: str
    name: str
    product_number: str
    attributes: tuple[str, ...] = ()


@dataclass(frozen=True)
class TemplateAccountProduct:
    id: str
    account_id: str
    product_id: str
    notes: str = ""
    type: PriceDetailType | None = None
    price: float | None = None


@dataclass(frozen=True)
class TemplateShippingLocation:
    id: str
    original_account_id: str
    related_account_id: str


@dataclass(frozen=True)
class TemplateCallNote:
    id: str
    account_id: str
    note: str
    type: str = "call"
    # A concrete datetime/date, an ISO-8601 string, or None for "now"
    call_date: datetime | date | str | None = None


@dataclass(frozen=True)
class TemplateDataset:
    accounts: tuple[TemplateAccount, ...] = ()
    contacts: tuple[TemplateContact, ...] = ()
    products: tuple[TemplateProduct, ...] = ()
    account_products: tuple[TemplateAccountProduct, ...] = ()
    shipping_locations: tuple[TemplateShippingLocation, ...] = ()
    call_notes: tuple[TemplateCallNote, ...] = ()


_AVATAR_URL = "https://images.unsplash.com/photo-{}?w=200&h=200&fit=crop"

DEFAULT_TEMPLATE = TemplateDataset(
    accounts=(
        TemplateAccount(
            id="acc_1",
            account_number="CUST-001",
            name="Innovate Corp",
            industry="Technology",
            status=AccountStatus.CUSTOMER,
            details=(
                "Long-standing customer, primarily uses our bulk solvent solutions. "
                "Exploring expansion into specialty chemicals."
            ),
            address="100 Market Street, New York, NY",
        ),
        TemplateAccount(
            id="acc_2",
            account_number="CUST-002",
            name="Apex Manufacturing",
            industry="Industrial",
            status=AccountStatus.KEY_ACCOUNT,
            details="Heavy user of drummed products. Consistent and reliable partner.",
            address="2200 Foundry Road, Chicago, IL",
        ),
        TemplateAccount(
            id="acc_3",
            account_number="LEAD-001",
            name="Quantum Solutions",
            industry="Biotechnology",
            status=AccountStatus.LEAD,
            details="New lead from recent trade show. Interested in high-purity solvents in pails.",
            address="456 Innovation Drive, Boston, MA",
        ),
        TemplateAccount(
            id="acc_4",
            account_number="SUPP-001",
            name="Apex Gary Terminal",
            industry="Logistics",
            status=AccountStatus.SUPPLIER,
            details="Bulk terminal serving Apex Manufacturing's Midwest plants.",
            address="15 Harbor Way, Gary, IN",
        ),
    ),
    contacts=(
        TemplateContact(
            id="con_1",
            account_number="CUST-001",
            name="Alice Johnson",
            phone="123-456-7890",
            email="alice.j@innovate.com",
            location="New York, NY",
            is_main_contact=True,
            avatar_url=_AVATAR_URL.format("1494790108377-be9c29b29330"),
        ),
        TemplateContact(
            id="con_2",
            account_number="CUST-001",
            name="Bob Williams",
            phone="123-456-7891",
            email="bob.w@innovate.com",
            location="New York, NY",
            avatar_url=_AVATAR_URL.format("1500648767791-00dcc994a43e"),
        ),
        TemplateContact(
            id="con_3",
            account_number="CUST-002",
            name="Charlie Brown",
            phone="234-567-8901",
            email="charlie.b@apex.com",
            location="Chicago, IL",
            is_main_contact=True,
            avatar_url=_AVATAR_URL.format("1506794778202-cad84cf45f1d"),
        ),
        TemplateContact(
            id="con_4",
            account_number="LEAD-001",
            name="Diana Prince",
            phone="345-678-9012",
            email="diana.p@quantum.com",
            location="Boston, MA",
            is_main_contact=True,
            avatar_url=_AVATAR_URL.format("1438761681033-6461ffad8d80"),
        ),
    ),
    products=(
        TemplateProduct("prod_1", "Isopropyl Alcohol 99%", "CHEM-001A", ("pails", "drums", "totes", "bulk")),
        TemplateProduct("prod_2", "Acetone", "CHEM-002B", ("pails", "drums")),
        TemplateProduct("prod_3", "Methanol", "CHEM-003C", ("pails", "drums", "totes", "bulk")),
        TemplateProduct("prod_4", "Toluene", "CHEM-004D", ("drums", "totes")),
    ),
    account_products=(
        TemplateAccountProduct(
            "ap_1",
            "acc_1",
            "prod_1",
            "Quarterly order of 5,000 gallons. Consistent usage.",
            PriceDetailType.LAST_PAID,
            4.15,
        ),
        TemplateAccountProduct(
            "ap_2",
            "acc_1",
            "prod_3",
            "Trialing for new manufacturing line. Potential for large volume increase.",
            PriceDetailType.QUOTE,
            2.80,
        ),
        TemplateAccountProduct("ap_3", "acc_2", "prod_2", "Standing order of 20 drums per month."),
    ),
    shipping_locations=(TemplateShippingLocation("sl_1", "acc_2", "acc_4"),),
    call_notes=(
        TemplateCallNote(
            "cn_1",
            "acc_1",
            "Discussed Q3 volumes. Alice expects a 10% increase and wants pricing on totes.",
            call_date="2024-06-12T15:30:00+00:00",
        ),
        TemplateCallNote(
            "cn_2",
            "acc_2",
            "Site visit. Charlie raised drum lead times; follow up with logistics.",
            type="visit",
            call_date="2024-06-20T10:00:00+00:00",
        ),
        TemplateCallNote(
            "cn_3",
            "acc_3",
            "Intro call after trade show. Send high-purity solvent samples in pails.",
        ),
    ),
)
